from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional
from .datatypes import Sentence, ScoredSentence, SelectedSet, WordFrequencyTable
from .preprocessing import PreprocessConfig, split_sentences, tokenize
from .features import build_frequency_table
from .scoring import score_sentences
from .selection import select_sentences, target_length
from .formatting import format_summary

logger = logging.getLogger(__name__)

FALLBACK_PREVIEW_CHARS = 500

@dataclass
class SummaryDetails:
    """Every intermediate of one local summarization run."""
    sentences: List[Sentence]
    frequencies: WordFrequencyTable
    scored: List[ScoredSentence]
    selected: SelectedSet
    summary: str

def summarize_details(text: str, cfg: Optional[PreprocessConfig] = None) -> SummaryDetails:
    # Pipeline glue; raises on bad input, callers wanting a string use local_summarize
    cfg = cfg or PreprocessConfig()
    sentences = split_sentences(text)
    freqs = build_frequency_table(tokenize(text, cfg), stopwords=cfg.stopwords)
    scored = score_sentences(sentences, freqs, cfg)
    selected = select_sentences(scored, target_length(text))
    summary = format_summary([s.text for s in selected.sentences])
    return SummaryDetails(sentences=sentences, frequencies=freqs, scored=scored,
                          selected=selected, summary=summary)

def fallback_message(text) -> str:
    preview = str(text or "")[:FALLBACK_PREVIEW_CHARS]
    return f"Summary could not be generated. Extracted text: {preview}..."

def local_summarize(text: str) -> str:
    """Offline extractive summary. Never raises."""
    try:
        return summarize_details(text).summary
    except Exception:
        logger.exception("Local summarization failed")
        return fallback_message(text)
