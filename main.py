from __future__ import annotations
import asyncio
import io
import logging
from dataclasses import replace

import streamlit as st
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt

from pdf_summarizer.config import LOG_FORMAT, Settings
from pdf_summarizer.features import top_words
from pdf_summarizer.gateway import summarize_text
from pdf_summarizer.pdf_text import extract_pdf_text
from pdf_summarizer.session import SessionState, UploadedPdf
from pdf_summarizer.summarize import local_summarize, summarize_details

logger = logging.getLogger("pdf_summarizer.app")

MODE_REMOTE = "Remote (local fallback)"
MODE_LOCAL = "Local only"


def get_session() -> SessionState:
    if "session" not in st.session_state:
        st.session_state["session"] = SessionState()
    return st.session_state["session"]


def draw_score_chart(details):
    """Bar chart of sentence scores; selected sentences highlighted."""
    selected = set(details.selected.positions())
    positions = [s.position for s in details.scored]
    freq = [s.frequency_score for s in details.scored]
    pos = [s.position_score for s in details.scored]
    length = [s.length_score for s in details.scored]

    fig, ax = plt.subplots(figsize=(12, 4))
    ax.bar(positions, freq, color='steelblue', label='Frequency')
    ax.bar(positions, pos, bottom=freq, color='orange', label='Position')
    ax.bar(positions, length, bottom=[f + p for f, p in zip(freq, pos)], color='gray', label='Length')
    for i in positions:
        if i in selected:
            ax.axvspan(i - 0.5, i + 0.5, color='yellow', alpha=0.25, lw=0)
    ax.set_xlabel("Sentence position")
    ax.set_ylabel("Score")
    ax.set_title("Sentence scores (highlighted = selected)", fontsize=12, fontweight='bold')
    ax.legend(loc='upper right')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf


def create_sidebar_controls(settings: Settings):
    st.sidebar.header("Summarization")
    mode = st.sidebar.radio("Mode", [MODE_REMOTE, MODE_LOCAL], index=0,
                            help="Remote mode uses the backend service and falls back to the local summarizer")
    backend_url = st.sidebar.text_input("Backend URL", value=settings.backend_url)

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Show local pipeline details", value=False)
    return mode, backend_url.strip() or settings.backend_url, debug_mode


def debug_pipeline(text: str):
    """Show the intermediates of the local summarizer for `text`."""
    details = summarize_details(text)
    scored = details.scored
    selected = set(details.selected.positions())

    st.header("Local pipeline")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Sentences", len(details.sentences))
    with col2:
        st.metric("Distinct words", len(details.frequencies))
    with col3:
        st.metric("Target length", details.selected.target_length)
    with col4:
        st.metric("Selected length", details.selected.current_length)

    if not scored:
        st.warning("No sentences found in the extracted text")
        return details

    with st.expander("Sentence scores", expanded=True):
        rows = []
        for s in scored:
            rows.append({
                "Sentence #": s.position + 1,
                "Frequency": round(s.frequency_score, 3),
                "Position": s.position_score,
                "Length": round(s.length_score, 3),
                "Score": round(s.score, 3),
                "Chars": s.length,
                "Selected": "✅" if s.position in selected else "❌",
                "Text": s.text[:80] + "..." if len(s.text) > 80 else s.text,
            })
        st.dataframe(pd.DataFrame(rows), use_container_width=True)

        arr = np.array([s.score for s in scored])
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Mean score", f"{arr.mean():.2f}")
        with col2:
            st.metric("Std score", f"{arr.std():.2f}")
        with col3:
            st.metric("Max score", f"{arr.max():.2f}")

        if len(scored) <= 200:
            st.image(draw_score_chart(details), caption="Score breakdown per sentence")

    with st.expander("Top words", expanded=False):
        freq_df = pd.DataFrame(top_words(details.frequencies), columns=["Word", "Count"])
        st.dataframe(freq_df, use_container_width=True)

    return details


def run_summary(text: str, mode: str, settings: Settings) -> str:
    logger.info("Summarizing %d characters (%s)", len(text), mode)
    if mode == MODE_LOCAL:
        return local_summarize(text)
    return asyncio.run(summarize_text(text, settings=settings))


def show_file_info(upload: UploadedPdf):
    st.markdown(
        f"**File:** {upload.name}  \n"
        f"**Size:** {upload.size_mb:.2f} MB  \n"
        f"**Type:** {upload.mime_type}"
    )


def main():
    settings = Settings.load()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    st.title("PDF Summarizer")
    st.write("Upload a PDF to extract its text and generate a summary")

    mode, backend_url, debug_mode = create_sidebar_controls(settings)
    settings = replace(settings, backend_url=backend_url)
    session = get_session()

    uploaded_file = st.file_uploader("Choose a PDF file", type=['pdf'],
                                     help="Only the first %d pages are read" % settings.page_limit)
    if uploaded_file is None:
        return

    upload = UploadedPdf(name=uploaded_file.name, data=uploaded_file.getvalue(),
                         mime_type=uploaded_file.type or "application/pdf")
    if session.accept_upload(upload):
        st.toast("PDF file selected. Ready for processing.")
    if session.current_file is None:
        return
    show_file_info(session.current_file)

    def extract(data: bytes) -> str:
        return extract_pdf_text(data, page_limit=settings.page_limit)

    col1, col2 = st.columns(2)
    with col1:
        extract_clicked = st.button("Extract Text")
    with col2:
        summarize_clicked = st.button("Summarize Content", type="primary")

    if extract_clicked or summarize_clicked:
        session.is_processing = True
        try:
            with st.spinner("Extracting text..."):
                session.ensure_text(extract)
            if summarize_clicked:
                with st.spinner("Generating summary..."):
                    session.summary = run_summary(session.extracted_text, mode, settings)
        finally:
            session.is_processing = False

    text_tab, summary_tab = st.tabs(["Extracted Text", "Summary"])
    with text_tab:
        if session.extracted_text:
            st.text_area("Content", session.extracted_text, height=300, disabled=True)
            st.download_button("Download text", session.extracted_text.encode("utf-8"),
                               file_name="extracted_text.txt", mime="text/plain")
        else:
            st.caption('Click "Extract Text" to process this PDF')
    with summary_tab:
        if session.summary:
            st.text_area("Generated Summary", session.summary, height=300, disabled=True)
            st.download_button("Download summary", session.summary.encode("utf-8"),
                               file_name="summary.txt", mime="text/plain")

            col1, col2, col3 = st.columns(3)
            original_words = len(session.extracted_text.split())
            summary_words = len(session.summary.split())
            with col1:
                st.metric("Original Length", original_words)
            with col2:
                st.metric("Summary Length", summary_words)
            with col3:
                compression = summary_words / original_words if original_words else 0
                st.metric("Actual Compression", f"{compression:.2%}")
        else:
            st.caption('Click "Summarize Content" to generate a summary')

    if debug_mode and session.extracted_text:
        st.markdown("---")
        debug_pipeline(session.extracted_text)


if __name__ == "__main__":
    main()
