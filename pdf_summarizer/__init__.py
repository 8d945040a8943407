from .datatypes import Sentence, ScoredSentence, SelectedSet, Paragraph, WordFrequencyTable
from .preprocessing import PreprocessConfig, STOPWORDS, split_sentences, tokenize
from .features import build_frequency_table
from .scoring import score_sentences
from .selection import select_sentences, target_length
from .formatting import format_summary, group_paragraphs
from .summarize import local_summarize, summarize_details, SummaryDetails
from .gateway import RemoteSummarizer, summarize_text
from .pdf_text import extract_pdf_text
from .config import Settings
