from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

def _env_get(env: Dict[str, Optional[str]], key: str, default: Optional[str] = None) -> Optional[str]:
    value = env.get(key)
    if value is None or value == "":
        return default
    return value

def _env_int(env: Dict[str, Optional[str]], key: str, default: int) -> int:
    try:
        return int(env.get(key) or default)
    except ValueError:
        return default

def _env_float(env: Dict[str, Optional[str]], key: str, default: float) -> float:
    try:
        return float(env.get(key) or default)
    except ValueError:
        return default

@dataclass(frozen=True)
class Settings:
    backend_url: str = "http://localhost:3001/api"
    health_timeout: float = 10.0
    request_timeout: float = 60.0

    port: int = 3001
    claude_api_key: Optional[str] = None
    claude_api_url: str = "https://api.anthropic.com/v1/messages"
    claude_model: str = "claude-3-sonnet-20240229"
    max_tokens: int = 1000
    temperature: float = 0.7
    max_input_chars: int = 100000

    page_limit: int = 10
    log_level: str = "INFO"

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "Settings":
        """Read `.env` (if present) with the process environment taking precedence."""
        env_file = env_file or Path.cwd() / ".env"
        env: Dict[str, Optional[str]] = dict(dotenv_values(env_file)) if env_file.exists() else {}
        env.update(os.environ)
        d = cls()
        return cls(
            backend_url=(_env_get(env, "PDF_SUMMARIZER_BACKEND_URL", d.backend_url) or d.backend_url).rstrip("/"),
            health_timeout=_env_float(env, "PDF_SUMMARIZER_HEALTH_TIMEOUT", d.health_timeout),
            request_timeout=_env_float(env, "PDF_SUMMARIZER_REQUEST_TIMEOUT", d.request_timeout),
            port=_env_int(env, "PORT", d.port),
            claude_api_key=_env_get(env, "CLAUDE_API_KEY"),
            claude_api_url=_env_get(env, "CLAUDE_API_URL", d.claude_api_url),
            claude_model=_env_get(env, "CLAUDE_MODEL", d.claude_model),
            max_tokens=_env_int(env, "CLAUDE_MAX_TOKENS", d.max_tokens),
            temperature=_env_float(env, "CLAUDE_TEMPERATURE", d.temperature),
            max_input_chars=_env_int(env, "PDF_SUMMARIZER_MAX_INPUT_CHARS", d.max_input_chars),
            page_limit=_env_int(env, "PDF_SUMMARIZER_PAGE_LIMIT", d.page_limit),
            log_level=(_env_get(env, "LOG_LEVEL", d.log_level) or d.log_level).upper(),
        )

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
