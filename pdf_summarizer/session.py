from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Optional

UPLOAD_COOLDOWN_SECONDS = 1.0


@dataclass
class UploadedPdf:
    name: str
    data: bytes
    mime_type: str = "application/pdf"

    @property
    def size_mb(self) -> float:
        return len(self.data) / (1024 * 1024)


@dataclass
class SessionState:
    """State of one browser session; handlers receive it explicitly."""
    current_file: Optional[UploadedPdf] = None
    extracted_text: str = ""
    summary: str = ""
    is_processing: bool = False
    last_processed_at: float = 0.0

    def accept_upload(self, upload: UploadedPdf, now: Optional[float] = None) -> bool:
        """Take a new file unless busy or inside the cooldown. Clears previous results."""
        now = time.monotonic() if now is None else now
        if self.current_file is not None and upload.name == self.current_file.name and upload.data == self.current_file.data:
            return False
        if self.is_processing or now - self.last_processed_at < UPLOAD_COOLDOWN_SECONDS:
            return False
        self.current_file = upload
        self.extracted_text = ""
        self.summary = ""
        self.last_processed_at = now
        return True

    def ensure_text(self, extract: Callable[[bytes], str]) -> str:
        if not self.extracted_text and self.current_file is not None:
            self.extracted_text = extract(self.current_file.data)
        return self.extracted_text
