"""Template provisioning API tests."""

import pytest
from httpx import AsyncClient

BASE = "/api/provisioning/templates"


@pytest.mark.asyncio
async def test_list_templates_empty(client: AsyncClient):
    resp = await client.get(BASE)
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_put_wraps_and_echoes(client: AsyncClient):
    resp = await client.put(f"{BASE}/welcome", json={"Template": "Hello {{ .Alert }}"})
    assert resp.status_code == 202
    assert resp.json() == {
        "Name": "welcome",
        "Template": '{{ define "welcome" }}\n  Hello {{ .Alert }}\n{{ end }}',
    }

    resp = await client.get(f"{BASE}/welcome")
    assert resp.status_code == 200
    assert resp.json()["Template"] == '{{ define "welcome" }}\n  Hello {{ .Alert }}\n{{ end }}'


@pytest.mark.asyncio
async def test_put_keeps_existing_define(client: AsyncClient):
    body = '{{ define "x" }}body{{ end }}'
    resp = await client.put(f"{BASE}/x", json={"Template": f"  {body}\n"})
    assert resp.status_code == 202
    assert resp.json()["Template"] == body


@pytest.mark.asyncio
async def test_put_empty_content_is_400(client: AsyncClient):
    resp = await client.put(f"{BASE}/t", json={"Template": ""})
    assert resp.status_code == 400
    assert resp.json() == {"message": "template must have content", "status": 400}

    resp = await client.put(f"{BASE}/t", json={})
    assert resp.status_code == 400

    resp = await client.get(f"{BASE}/t")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_list_after_put(client: AsyncClient):
    await client.put(f"{BASE}/b", json={"Template": "B"})
    await client.put(f"{BASE}/a", json={"Template": "A"})
    resp = await client.get(BASE)
    assert resp.status_code == 200
    assert [t["Name"] for t in resp.json()] == ["a", "b"]


@pytest.mark.asyncio
async def test_get_unknown_is_404(client: AsyncClient):
    resp = await client.get(f"{BASE}/missing")
    assert resp.status_code == 404
    assert "missing" in resp.json()["message"]


@pytest.mark.asyncio
async def test_delete_template(client: AsyncClient):
    await client.put(f"{BASE}/del", json={"Template": "bye"})
    resp = await client.delete(f"{BASE}/del")
    assert resp.status_code == 204

    resp = await client.get(f"{BASE}/del")
    assert resp.status_code == 404

    resp = await client.delete(f"{BASE}/del")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_sync_endpoint(client: AsyncClient, tmp_path, monkeypatch):
    from app.config import settings

    (tmp_path / "t.yaml").write_text("templates:\n  - name: filed\n    template: from disk\n")
    (tmp_path / "bad.yaml").write_text("templates: 5\n")
    monkeypatch.setattr(settings, "provisioning_dir", tmp_path)

    resp = await client.post(f"{BASE}/sync")
    assert resp.status_code == 200
    data = resp.json()
    assert data["created"] == ["filed"]
    assert data["message"] == "1 created, 0 updated, 0 failed"

    resp = await client.get(f"{BASE}/filed")
    assert resp.json()["Template"] == '{{ define "filed" }}\n  from disk\n{{ end }}'


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
