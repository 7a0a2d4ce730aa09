"""GET /api/themes: full listing, null descriptions as "", stable output.

Invariants:
    - Every stored theme appears exactly once
    - theme_desc is "" when the column is null
    - Same store, same request -> byte-identical body
    - Any HTTP method is served
"""

from museum_api.core.errors import StoreError


async def test_lists_every_theme_once(client, seed_exhibits):
    res = await client.get("/api/themes")
    assert res.status_code == 200
    ids = [t["theme_id"] for t in res.json()]
    assert sorted(ids) == ["T1", "T2"]
    assert len(ids) == len(set(ids))


async def test_null_description_becomes_empty_string(client, seed_exhibits):
    res = await client.get("/api/themes")
    by_id = {t["theme_id"]: t for t in res.json()}
    assert by_id["T1"]["theme_desc"] == ""
    assert by_id["T2"]["theme_desc"] == "Tools and weapons"


async def test_declares_utf8_json_and_keeps_korean_text(client, seed_exhibits):
    res = await client.get("/api/themes")
    assert res.headers["content-type"] == "application/json; charset=utf-8"
    assert "조선 왕실".encode("utf-8") in res.content


async def test_repeated_calls_are_byte_identical(client, seed_exhibits):
    first = await client.get("/api/themes")
    second = await client.get("/api/themes")
    assert first.content == second.content


async def test_empty_store_returns_empty_array(client):
    res = await client.get("/api/themes")
    assert res.status_code == 200
    assert res.json() == []


async def test_any_method_is_served(client, seed_exhibits):
    for method in ("POST", "DELETE", "TRACE", "PROPFIND"):
        res = await client.request(method, "/api/themes")
        assert res.status_code == 200, method
        assert len(res.json()) == 2


async def test_store_failure_returns_500_with_cause(stub_client, stub_repo):
    stub_repo.fail_with = StoreError("connection refused", "get_all_themes")

    res = await stub_client.get("/api/themes")

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "STORE_ERROR"
    assert "connection refused" in error["message"]
