from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import List, FrozenSet, Optional
from .datatypes import Sentence

_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
_WORD_RE = re.compile(r"\w+")  # maximal runs of Unicode word characters

STOPWORDS: FrozenSet[str] = frozenset({
    # closed English function-word list
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of', 'with', 'by',
})

@dataclass
class PreprocessConfig:
    lowercase: bool = True
    stopwords: FrozenSet[str] = field(default_factory=lambda: STOPWORDS)

def split_sentences(text: str) -> List[Sentence]:
    """
    Split on whitespace that follows '.', '!' or '?'.

    The input is not stripped first: leading whitespace stays on the first piece
    and trailing whitespace on the last one, and both count towards `length`.
    Blank pieces are dropped before positions are assigned.
    """
    parts = _SENTENCE_BOUNDARY_RE.split(text)
    sentences: List[Sentence] = []
    for p in parts:
        if not p.strip():
            continue
        sentences.append(Sentence(position=len(sentences), text=p.strip(), length=len(p)))
    return sentences

def tokenize(text: str, cfg: Optional[PreprocessConfig] = None) -> List[str]:
    cfg = cfg or PreprocessConfig()
    if cfg.lowercase:
        text = text.lower()
    return _WORD_RE.findall(text)
