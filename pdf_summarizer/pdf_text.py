from __future__ import annotations
import io
import logging
from typing import Any, Dict, Iterable, List, Optional

import pdfplumber

logger = logging.getLogger(__name__)

PDF_SIGNATURE = b"%PDF"
DEFAULT_PAGE_LIMIT = 10
DEFAULT_LINE_GAP = 5.0  # points of vertical movement that start a new line
NO_TEXT_MESSAGE = "No text could be extracted from this PDF."
FAILURE_PREFIX = "Failed to extract text from PDF: "


def is_pdf(data: bytes) -> bool:
    return bool(data) and data.lstrip()[:4] == PDF_SIGNATURE


def words_to_text(words: Iterable[Dict[str, Any]], line_gap: float = DEFAULT_LINE_GAP) -> str:
    """Join words in reading order, breaking lines where `top` jumps by more than `line_gap`."""
    out: List[str] = []
    last_top: Optional[float] = None
    for w in words:
        top = float(w["top"])
        if last_top is not None:
            out.append("\n" if abs(top - last_top) > line_gap else " ")
        last_top = top
        out.append(w["text"])
    return "".join(out)


def extract_pdf_text(data: bytes, page_limit: int = DEFAULT_PAGE_LIMIT,
                     line_gap: float = DEFAULT_LINE_GAP) -> str:
    """
    Page-ordered text of the first `page_limit` pages.

    Pages that fail are logged and skipped. Never raises: an unreadable document
    yields a "Failed to extract text" message and an empty one NO_TEXT_MESSAGE.
    """
    if not is_pdf(data):
        return FAILURE_PREFIX + "Not a valid PDF file"

    pages: List[str] = []
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            total = len(pdf.pages)
            if total > page_limit:
                logger.info("PDF has %d pages; only the first %d are read", total, page_limit)
            for i, page in enumerate(pdf.pages[:page_limit], start=1):
                try:
                    pages.append(words_to_text(page.extract_words(), line_gap=line_gap))
                except Exception:
                    logger.exception("Error extracting text from page %d", i)
                finally:
                    page.close()
    except Exception as e:
        logger.exception("PDF extraction failed")
        return FAILURE_PREFIX + str(e)

    text = "\n\n".join(pages).strip()
    return text or NO_TEXT_MESSAGE
