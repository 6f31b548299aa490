"""Project, version and search API routes used by the docs portal.

- /api/projects -> project list with favorites first and the default version
- /api/projects/{name} -> versions newest first
- /api/search -> project, version and tag matches
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.adapters.project_store import ProjectStore
from app.models.error import ErrorDetail
from app.models.project import ProjectDescriptor, ProjectListing, VersionDescriptor
from app.models.search import SearchResult
from app.services import docs_urls, search_service, version_service
from app.services.favorite_service import FavoriteStore

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorDetail}}


def get_store(request: Request) -> ProjectStore:
    return request.app.state.project_store


def get_favorites(request: Request) -> FavoriteStore:
    return request.app.state.favorites


def _require_project(store: ProjectStore, name: str) -> ProjectDescriptor:
    project = store.get_project(name)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("/projects", response_model=list[ProjectListing])
async def list_projects(
    store: ProjectStore = Depends(get_store),
    favorites: FavoriteStore = Depends(get_favorites),
) -> list[ProjectListing]:
    visible = version_service.filter_hidden_versions(store.iter_projects())
    out: list[ProjectListing] = []
    for project in favorites.sort_by_favorite(visible):
        out.append(
            ProjectListing(
                name=project.name,
                versions=version_service.sort_versions(project.versions, descending=True),
                favorite=favorites.is_favorite(project.name),
                logo_url=docs_urls.project_logo_url(project.name),
                latest=version_service.get_latest_version(project.versions).name,
            )
        )
    return out


@router.get("/projects/{name}", response_model=ProjectDescriptor, responses=NOT_FOUND)
async def get_project(
    name: str,
    include_hidden: bool = Query(False, description="Include hidden versions."),
    store: ProjectStore = Depends(get_store),
) -> ProjectDescriptor:
    project = _require_project(store, name)
    if include_hidden:
        versions = version_service.sort_versions(project.versions, descending=True)
    else:
        versions = version_service.visible_versions(project)
        if not versions:
            raise HTTPException(status_code=404, detail="Project not found")
    return ProjectDescriptor(name=project.name, versions=versions)


@router.get(
    "/projects/{name}/latest",
    response_model=VersionDescriptor,
    responses={**NOT_FOUND, 400: {"model": ErrorDetail}},
)
async def get_latest_version(name: str, store: ProjectStore = Depends(get_store)) -> VersionDescriptor:
    project = _require_project(store, name)
    # InvalidInputError (no visible versions) is answered with 400 by the app handler
    return version_service.get_latest_version([v for v in project.versions if not v.hidden])


@router.get("/search", response_model=SearchResult)
async def search(
    q: str = Query("", description="Search query (case-insensitive substring match)."),
    store: ProjectStore = Depends(get_store),
) -> SearchResult:
    return search_service.search(store.iter_projects(), q)


def _favorite_payload(favorites: FavoriteStore, name: str) -> dict:
    return {"project": name, "favorite": favorites.is_favorite(name)}


@router.get("/projects/{name}/favorite")
async def get_favorite(name: str, favorites: FavoriteStore = Depends(get_favorites)) -> dict:
    return _favorite_payload(favorites, name)


@router.put("/projects/{name}/favorite", responses=NOT_FOUND)
async def mark_favorite(
    name: str,
    store: ProjectStore = Depends(get_store),
    favorites: FavoriteStore = Depends(get_favorites),
) -> dict:
    _require_project(store, name)
    favorites.set_favorite(name, True)
    return _favorite_payload(favorites, name)


@router.delete("/projects/{name}/favorite")
async def unmark_favorite(name: str, favorites: FavoriteStore = Depends(get_favorites)) -> dict:
    favorites.set_favorite(name, False)
    return _favorite_payload(favorites, name)
