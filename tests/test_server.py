from aiohttp import web

import pdf_summarizer.server as server_mod
from pdf_summarizer.config import Settings
from pdf_summarizer.gateway import RemoteSummarizer
from pdf_summarizer.server import create_app


def upstream_app(captured, status=200, body=None):
    async def messages(request):
        captured["headers"] = request.headers.copy()
        captured["body"] = await request.json()
        payload = body if body is not None else {"content": [{"type": "text", "text": "  - point one\n"}]}
        return web.json_response(payload, status=status)

    app = web.Application()
    app.router.add_post("/v1/messages", messages)
    return app


async def backend_client(aiohttp_server, aiohttp_client, captured, api_key="test-key", **upstream):
    upstream_server = await aiohttp_server(upstream_app(captured, **upstream))
    settings = Settings(claude_api_key=api_key,
                        claude_api_url=str(upstream_server.make_url("/v1/messages")),
                        max_input_chars=100)
    return await aiohttp_client(create_app(settings))


async def test_health(aiohttp_client):
    client = await aiohttp_client(create_app(Settings()))
    resp = await client.get("/api/health")
    assert resp.status == 200
    assert await resp.json() == {"status": "ok"}


async def test_summarize_success(aiohttp_server, aiohttp_client):
    captured = {}
    client = await backend_client(aiohttp_server, aiohttp_client, captured)
    resp = await client.post("/api/summarize", json={"text": "Some document text."})
    assert resp.status == 200
    assert await resp.json() == {"summary": "- point one"}

    assert captured["headers"]["x-api-key"] == "test-key"
    assert captured["headers"]["anthropic-version"] == "2023-06-01"
    body = captured["body"]
    assert body["model"] == Settings().claude_model
    assert body["max_tokens"] == 1000
    assert body["system"] == server_mod.SYSTEM_PROMPT
    assert body["messages"][0]["role"] == "user"
    assert body["messages"][0]["content"].endswith("Text content:\nSome document text.")


async def test_long_text_is_truncated(aiohttp_server, aiohttp_client):
    captured = {}
    client = await backend_client(aiohttp_server, aiohttp_client, captured)
    resp = await client.post("/api/summarize", json={"text": "a" * 100 + "z" * 50})
    assert resp.status == 200
    assert captured["body"]["messages"][0]["content"].endswith("\n" + "a" * 100)


async def test_missing_text_is_rejected(aiohttp_client):
    client = await aiohttp_client(create_app(Settings()))
    resp = await client.post("/api/summarize", json={})
    assert resp.status == 400
    assert await resp.json() == {"error": "Text is required"}


async def test_invalid_json_is_rejected(aiohttp_client):
    client = await aiohttp_client(create_app(Settings()))
    resp = await client.post("/api/summarize", data="not json",
                             headers={"Content-Type": "application/json"})
    assert resp.status == 400
    assert await resp.json() == {"error": "Invalid JSON body"}


async def test_upstream_error_maps_to_500(aiohttp_server, aiohttp_client):
    captured = {}
    client = await backend_client(aiohttp_server, aiohttp_client, captured, status=401,
                                  body={"error": {"type": "authentication_error", "message": "invalid x-api-key"}})
    resp = await client.post("/api/summarize", json={"text": "Some text."})
    assert resp.status == 500
    assert await resp.json() == {"error": "Failed to generate summary",
                                 "details": "API request failed: invalid x-api-key"}


async def test_malformed_upstream_response_maps_to_500(aiohttp_server, aiohttp_client):
    captured = {}
    client = await backend_client(aiohttp_server, aiohttp_client, captured, body={"content": []})
    resp = await client.post("/api/summarize", json={"text": "Some text."})
    assert resp.status == 500
    assert (await resp.json())["details"] == "Invalid API response format"


async def test_missing_api_key_maps_to_500(aiohttp_server, aiohttp_client):
    captured = {}
    client = await backend_client(aiohttp_server, aiohttp_client, captured, api_key=None)
    resp = await client.post("/api/summarize", json={"text": "Some text."})
    assert resp.status == 500
    assert "CLAUDE_API_KEY" in (await resp.json())["details"]
    assert captured == {}


async def test_unexpected_errors_are_caught_by_middleware(aiohttp_client, monkeypatch):
    async def boom(session, settings, text):
        raise RuntimeError("boom")

    monkeypatch.setattr(server_mod, "request_completion", boom)
    client = await aiohttp_client(create_app(Settings()))
    resp = await client.post("/api/summarize", json={"text": "Some text."})
    assert resp.status == 500
    assert await resp.json() == {"error": "Something went wrong!", "details": "boom"}


async def test_gateway_against_backend(aiohttp_server, aiohttp_client):
    captured = {}
    client = await backend_client(aiohttp_server, aiohttp_client, captured)
    gateway = RemoteSummarizer(base_url=str(client.server.make_url("/api")))
    assert await gateway.summarize("Document text.") == "- point one"
