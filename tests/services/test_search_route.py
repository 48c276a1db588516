"""Search route tests: redirects, aliases, landing page, history side effect.

Invariants:
    - GET /?cmd=... answers 303 with the resolved Location
    - History failure never changes the redirect
"""

from contextlib import asynccontextmanager
from urllib.parse import parse_qs, urlparse

import linkhop.infrastructure.database as db_module
from linkhop.core.errors import DatabaseError


async def test_command_redirects_with_303(client):
    res = await client.get("/", params={"cmd": "gh facebook/react"})
    assert res.status_code == 303
    assert res.headers["location"] == "https://github.com/facebook/react"


async def test_alias_is_resolved_before_routing(client):
    res = await client.get("/", params={"cmd": "work"})
    assert res.status_code == 303
    assert res.headers["location"] == "https://github.com/mbinns"


async def test_ticker_prefix(client):
    res = await client.get("/", params={"cmd": "$AAPL"})
    assert res.headers["location"] == "https://finance.yahoo.com/quote/AAPL"


async def test_unknown_command_falls_back_to_search(client):
    res = await client.get("/", params={"cmd": "what is linkhop"})
    location = urlparse(res.headers["location"])
    assert location.netloc == "www.google.com"
    assert parse_qs(location.query)["q"] == ["what is linkhop"]


async def test_empty_cmd_still_redirects(client):
    res = await client.get("/", params={"cmd": ""})
    assert res.status_code == 303
    assert res.headers["location"] == "https://www.google.com/search?q="


async def test_no_cmd_renders_landing_page(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "<code>gh</code>" in res.text
    assert "gh mbinns" in res.text  # user alias listed


async def test_bindings_page(client):
    res = await client.get("/bindings")
    assert res.status_code == 200
    assert "Commands (47)" in res.text


async def test_unknown_path_renders_landing_page_with_404(client):
    res = await client.get("/does/not/exist")
    assert res.status_code == 404
    assert "<h1>linkhop</h1>" in res.text


async def test_health(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.text == "ok"


async def test_readiness_with_history_disabled(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["history"] == "disabled"


async def test_commands_api(client):
    res = await client.get("/api/v1/commands")
    assert res.status_code == 200
    body = res.json()
    assert len(body) == 47
    assert body[0]["bindings"] == ["list", "bindings", "commands"]


async def test_history_api_empty_when_disabled(client):
    res = await client.get("/api/v1/history")
    assert res.status_code == 200
    assert res.json() == []


async def test_history_api_validates_limit(client):
    res = await client.get("/api/v1/history", params={"limit": 0})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert res.json()["error"]["category"] == "validation"


# ─── History enabled ─────────────────────────────────────────────

async def test_redirect_records_raw_command(history_client):
    await history_client.get("/", params={"cmd": "work"})
    await history_client.get("/", params={"cmd": "yt lofi"})

    res = await history_client.get("/api/v1/history")
    assert res.status_code == 200
    entries = res.json()
    assert [e["raw_command"] for e in entries] == ["yt lofi", "work"]
    assert entries[0]["client_identifier"]


async def test_readiness_with_history_enabled(history_client):
    res = await history_client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["history"] == "healthy"


async def test_history_failure_does_not_block_redirect(history_client, monkeypatch):
    class _BrokenManager:
        @asynccontextmanager
        async def session(self):
            raise DatabaseError("disk full", "commit")
            yield  # pragma: no cover

    monkeypatch.setattr(db_module, "db_manager", _BrokenManager())

    res = await history_client.get("/", params={"cmd": "gh mbinns"})
    assert res.status_code == 303
    assert res.headers["location"] == "https://github.com/mbinns"


async def test_history_without_initialized_database_still_redirects(
    history_client, monkeypatch,
):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await history_client.get("/", params={"cmd": "r r/rust"})
    assert res.status_code == 303
    assert res.headers["location"] == "https://www.reddit.com/r/rust"
