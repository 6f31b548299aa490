"""Substring search over project names, version names and version tags."""

from __future__ import annotations

from typing import Iterable

from app.models.project import ProjectDescriptor
from app.models.search import ProjectSearchResult, SearchResult, VersionSearchResult


def search(projects: Iterable[ProjectDescriptor], query: str) -> SearchResult:
    """Case-insensitive containment match; hidden versions never match.

    Version-name hits come before tag hits. A tag hit reports the tag itself
    as the `version` so the portal can link straight to it.
    """
    q = (query or "").lower().strip()
    projects = list(projects)

    project_results = [
        ProjectSearchResult(name=p.name)
        for p in projects
        if q in p.name.lower() and any(not v.hidden for v in p.versions)
    ]

    version_results: list[VersionSearchResult] = []
    tag_results: list[VersionSearchResult] = []
    for p in projects:
        for v in p.versions:
            if v.hidden:
                continue
            if q in v.name.lower():
                version_results.append(VersionSearchResult(project=p.name, version=v.name))
            for tag in v.tags:
                if q in tag.lower():
                    tag_results.append(VersionSearchResult(project=p.name, version=tag))

    return SearchResult(projects=project_results, versions=version_results + tag_results)
