from __future__ import annotations
from typing import List
from .datatypes import Paragraph

SUMMARY_HEADER = "\U0001F4DD Summary"
EMPTY_SUMMARY_MESSAGE = "No significant content found to summarize."
SENTENCES_PER_PARAGRAPH = 3

def group_paragraphs(texts: List[str], size: int = SENTENCES_PER_PARAGRAPH) -> List[Paragraph]:
    return [Paragraph(sentences=texts[i:i + size]) for i in range(0, len(texts), size)]

def format_summary(texts: List[str]) -> str:
    """Header line, blank line, then paragraphs separated by blank lines."""
    if not texts:
        return EMPTY_SUMMARY_MESSAGE
    body = "\n\n".join(p.render() for p in group_paragraphs(texts))
    return f"{SUMMARY_HEADER}\n\n{body}"
