from pdf_summarizer.session import SessionState, UploadedPdf


def _upload(name="a.pdf", data=b"%PDF-a"):
    return UploadedPdf(name=name, data=data)


def test_first_upload_is_accepted():
    s = SessionState()
    assert s.accept_upload(_upload(), now=10.0)
    assert s.current_file.name == "a.pdf"


def test_cooldown_blocks_quick_replacement():
    s = SessionState()
    s.accept_upload(_upload(), now=10.0)
    assert not s.accept_upload(_upload("b.pdf", b"%PDF-b"), now=10.5)
    assert s.current_file.name == "a.pdf"
    assert s.accept_upload(_upload("b.pdf", b"%PDF-b"), now=11.5)
    assert s.current_file.name == "b.pdf"


def test_new_upload_clears_results():
    s = SessionState()
    s.accept_upload(_upload(), now=10.0)
    s.extracted_text, s.summary = "text", "summary"
    s.accept_upload(_upload("b.pdf", b"%PDF-b"), now=20.0)
    assert s.extracted_text == "" and s.summary == ""


def test_same_file_is_not_reprocessed():
    s = SessionState()
    s.accept_upload(_upload(), now=10.0)
    s.extracted_text = "kept"
    assert not s.accept_upload(_upload(), now=50.0)
    assert s.extracted_text == "kept"


def test_busy_session_rejects_upload():
    s = SessionState(is_processing=True)
    assert not s.accept_upload(_upload(), now=10.0)


def test_ensure_text_extracts_once():
    calls = []

    def extract(data):
        calls.append(data)
        return "extracted"

    s = SessionState()
    s.accept_upload(_upload(), now=10.0)
    assert s.ensure_text(extract) == "extracted"
    assert s.ensure_text(extract) == "extracted"
    assert calls == [b"%PDF-a"]


def test_size_in_megabytes():
    assert UploadedPdf(name="x.pdf", data=b"0" * (1024 * 1024)).size_mb == 1.0
