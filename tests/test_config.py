import pytest

from pdf_summarizer.config import Settings

KEYS = ["PDF_SUMMARIZER_BACKEND_URL", "PORT", "CLAUDE_API_KEY", "CLAUDE_MODEL",
        "PDF_SUMMARIZER_PAGE_LIMIT", "LOG_LEVEL", "CLAUDE_TEMPERATURE"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_env_file(tmp_path):
    s = Settings.load(env_file=tmp_path / ".env")
    assert s.backend_url == "http://localhost:3001/api"
    assert s.port == 3001
    assert s.claude_api_key is None
    assert s.page_limit == 10


def test_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CLAUDE_API_KEY=abc\nPORT=4000\nPDF_SUMMARIZER_BACKEND_URL=http://backend:9000/api/\n")
    s = Settings.load(env_file=env_file)
    assert s.claude_api_key == "abc"
    assert s.port == 4000
    assert s.backend_url == "http://backend:9000/api"


def test_process_env_wins(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=4000\nLOG_LEVEL=warning\n")
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings.load(env_file=env_file)
    assert s.port == 5000
    assert s.log_level == "DEBUG"


def test_bad_numbers_fall_back(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("CLAUDE_TEMPERATURE", "warm")
    s = Settings.load(env_file=tmp_path / ".env")
    assert s.port == 3001
    assert s.temperature == 0.7
