"""Tests for project, favorite and search API routes."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.models.project import ProjectDescriptor, VersionDescriptor


def v(name, tags=None, hidden=False):
    return VersionDescriptor(name=name, tags=tags or [], hidden=hidden)


@pytest.fixture
def project_store():
    store = app.state.project_store
    store.upsert_project(ProjectDescriptor(name="alpha", versions=[v("1.2.3"), v("1.10.0"), v("2.0.0", hidden=True)]))
    store.upsert_project(ProjectDescriptor(name="beta", versions=[v("0.1.0", ["latest"]), v("0.2.0", ["v1-beta"])]))
    store.upsert_project(ProjectDescriptor(name="ghost", versions=[v("1.0.0", hidden=True)]))
    return store


@pytest_asyncio.fixture
async def client(project_store):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_list_projects_hides_hidden_and_resolves_latest(client: AsyncClient):
    response = await client.get("/api/projects")
    assert response.status_code == 200
    data = response.json()
    assert [p["name"] for p in data] == ["alpha", "beta"]
    alpha, beta = data
    assert [x["name"] for x in alpha["versions"]] == ["1.10.0", "1.2.3"]
    assert alpha["latest"] == "1.10.0"
    assert alpha["logo_url"] == "/doc/alpha/logo"
    assert alpha["favorite"] is False
    assert beta["latest"] == "0.1.0"


@pytest.mark.asyncio
async def test_favorites_listed_first(client: AsyncClient):
    put = await client.put("/api/projects/beta/favorite")
    assert put.status_code == 200
    assert put.json() == {"project": "beta", "favorite": True}

    data = (await client.get("/api/projects")).json()
    assert [p["name"] for p in data] == ["beta", "alpha"]
    assert data[0]["favorite"] is True

    deleted = await client.delete("/api/projects/beta/favorite")
    assert deleted.json() == {"project": "beta", "favorite": False}
    assert "beta" not in app.state.favorites._store.keys()
    got = await client.get("/api/projects/beta/favorite")
    assert got.json()["favorite"] is False


@pytest.mark.asyncio
async def test_favorite_unknown_project_returns_404(client: AsyncClient):
    response = await client.put("/api/projects/nope/favorite")
    assert response.status_code == 404
    assert response.json() == {"detail": "Project not found"}


@pytest.mark.asyncio
async def test_get_project_sorted_newest_first(client: AsyncClient):
    response = await client.get("/api/projects/alpha")
    assert response.status_code == 200
    assert [x["name"] for x in response.json()["versions"]] == ["1.10.0", "1.2.3"]

    hidden = await client.get("/api/projects/alpha", params={"include_hidden": "true"})
    assert [x["name"] for x in hidden.json()["versions"]] == ["2.0.0", "1.10.0", "1.2.3"]


@pytest.mark.asyncio
async def test_hidden_only_project_requires_include_hidden(client: AsyncClient):
    response = await client.get("/api/projects/ghost")
    assert response.status_code == 404
    response = await client.get("/api/projects/ghost", params={"include_hidden": "true"})
    assert response.status_code == 200
    assert response.json()["versions"][0]["hidden"] is True


@pytest.mark.asyncio
async def test_missing_project_returns_404(client: AsyncClient):
    response = await client.get("/api/projects/does-not-exist")
    assert response.status_code == 404
    assert response.json()["detail"] == "Project not found"


@pytest.mark.asyncio
async def test_latest_endpoint(client: AsyncClient):
    assert (await client.get("/api/projects/alpha/latest")).json()["name"] == "1.10.0"
    assert (await client.get("/api/projects/beta/latest")).json()["name"] == "0.1.0"
    ghost = await client.get("/api/projects/ghost/latest")
    assert ghost.status_code == 400
    assert list(ghost.json()) == ["detail"]
    missing = await client.get("/api/projects/nope/latest")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_search_endpoint(client: AsyncClient):
    response = await client.get("/api/search", params={"q": "BETA"})
    assert response.status_code == 200
    assert response.json() == {
        "projects": [{"name": "beta"}],
        "versions": [{"project": "beta", "version": "v1-beta"}],
    }


@pytest.mark.asyncio
async def test_search_hidden_only_project_not_returned(client: AsyncClient):
    response = await client.get("/api/search", params={"q": "ghost"})
    assert response.json() == {"projects": [], "versions": []}


@pytest.mark.asyncio
async def test_health_and_ready(client: AsyncClient):
    health = await client.get("/api/health")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"
    ready = await client.get("/api/ready")
    assert ready.status_code == 200
    assert ready.json()["status"] == "ready"
    root = await client.get("/")
    assert root.json()["health"] == "/api/health"
