from __future__ import annotations
import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import web

from .config import LOG_FORMAT, Settings

logger = logging.getLogger(__name__)

SETTINGS_KEY = web.AppKey("settings", Settings)
HTTP_SESSION_KEY = web.AppKey("http_session", aiohttp.ClientSession)

ANTHROPIC_VERSION = "2023-06-01"
SYSTEM_PROMPT = "You are a professional text summarization assistant."
PROMPT_TEMPLATE = """You are a professional text summarization assistant. Please summarize the following text with the following requirements:
1. Keep it concise and clear
2. Highlight key information
3. Use bullet points
4. Keep the summary under 300 words

Text content:
{text}"""


class UpstreamError(Exception):
    """The language-model API failed or returned something unusable."""


def build_prompt(text: str, max_chars: int) -> str:
    return PROMPT_TEMPLATE.format(text=text[:max_chars])


def build_payload(settings: Settings, prompt: str) -> Dict[str, Any]:
    return {
        "model": settings.claude_model,
        "max_tokens": settings.max_tokens,
        "temperature": settings.temperature,
        "system": SYSTEM_PROMPT,
        "messages": [{"role": "user", "content": prompt}],
    }


def extract_summary(data: Any) -> str:
    try:
        text = data["content"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise UpstreamError("Invalid API response format")
    if not isinstance(text, str) or not text:
        raise UpstreamError("Invalid API response format")
    return text.strip()


async def request_completion(session: aiohttp.ClientSession, settings: Settings, text: str) -> str:
    if not settings.claude_api_key:
        raise UpstreamError("CLAUDE_API_KEY is not configured")
    headers = {
        "Content-Type": "application/json",
        "x-api-key": settings.claude_api_key,
        "anthropic-version": ANTHROPIC_VERSION,
    }
    payload = build_payload(settings, build_prompt(text, settings.max_input_chars))
    async with session.post(settings.claude_api_url, json=payload, headers=headers,
                            timeout=aiohttp.ClientTimeout(total=settings.request_timeout)) as resp:
        try:
            data = await resp.json(content_type=None)
        except ValueError:
            data = None
        if resp.status >= 400:
            logger.error("Upstream API error (HTTP %s): %s", resp.status, data)
            message: Optional[str] = None
            if isinstance(data, dict) and isinstance(data.get("error"), dict):
                message = data["error"].get("message")
            raise UpstreamError(f"API request failed: {message or resp.reason}")
        return extract_summary(data)


async def health(_: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})


async def summarize_handler(request: web.Request) -> web.Response:
    try:
        payload = await request.json()
    except ValueError:
        return web.json_response({"error": "Invalid JSON body"}, status=400)

    text = payload.get("text") if isinstance(payload, dict) else None
    if not text or not isinstance(text, str):
        return web.json_response({"error": "Text is required"}, status=400)

    try:
        summary = await request_completion(request.app[HTTP_SESSION_KEY], request.app[SETTINGS_KEY], text)
    except (UpstreamError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Summarization failed: %r", e)
        return web.json_response({"error": "Failed to generate summary", "details": str(e)}, status=500)
    return web.json_response({"summary": summary})


@web.middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return web.json_response({"error": "Something went wrong!", "details": str(e)}, status=500)


def create_app(settings: Optional[Settings] = None) -> web.Application:
    app = web.Application(middlewares=[error_middleware], client_max_size=10 * 1024 ** 2)
    app[SETTINGS_KEY] = settings or Settings.load()

    async def on_startup(app: web.Application) -> None:
        app[HTTP_SESSION_KEY] = aiohttp.ClientSession()
        logger.info("Upstream ClientSession initialized")

    async def on_cleanup(app: web.Application) -> None:
        await app[HTTP_SESSION_KEY].close()
        logger.info("Upstream ClientSession closed")

    app.on_startup.append(on_startup)
    app.on_cleanup.append(on_cleanup)

    app.router.add_get("/api/health", health)
    app.router.add_post("/api/summarize", summarize_handler)
    return app


def main() -> None:
    settings = Settings.load()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logger.info("Server running on port %s", settings.port)
    logger.info("Health check available at http://localhost:%s/api/health", settings.port)
    web.run_app(create_app(settings), port=settings.port)


if __name__ == "__main__":
    main()
