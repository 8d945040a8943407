from __future__ import annotations
from typing import Iterable, List, Tuple
from collections import Counter
from .datatypes import WordFrequencyTable
from .preprocessing import STOPWORDS

def build_frequency_table(tokens: Iterable[str], stopwords: Iterable[str] = STOPWORDS) -> WordFrequencyTable:
    """Raw document-wide counts of every non-stop-word token. No smoothing, no stemming."""
    excluded = set(stopwords)
    tf = Counter(t for t in tokens if t and t not in excluded)
    return dict(tf)

def top_words(table: WordFrequencyTable, k: int = 20) -> List[Tuple[str, int]]:
    # most frequent first, alphabetical among equals so the debug view is stable
    return sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))[:k]
