"""ProjectStore abstraction + in-memory backend.

Holds the project/version catalogue the portal serves. Project names are
unique and case-sensitive; version names are unique within a project.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional, Protocol

from pydantic import ValidationError

from app.models.project import ProjectDescriptor, VersionDescriptor

log = logging.getLogger(__name__)


class ProjectStore(Protocol):
    """Protocol for project catalogue storage."""

    def get_project(self, name: str) -> Optional[ProjectDescriptor]:
        ...

    def iter_projects(self) -> list[ProjectDescriptor]:
        ...

    def upsert_project(self, project: ProjectDescriptor) -> None:
        ...

    def add_version(self, project_name: str, version: VersionDescriptor) -> None:
        """Add or replace a version, creating the project when needed."""
        ...

    def remove_version(self, project_name: str, version_name: str) -> bool:
        """Remove a version. Drops the project when its last version goes."""
        ...

    def count_projects(self) -> int:
        ...


class InMemoryProjectStore:
    """In-memory ProjectStore. Optional JSON persistence for restart."""

    def __init__(self, persist_path: Optional[str] = None) -> None:
        self._projects: dict[str, ProjectDescriptor] = {}
        self._persist_path = persist_path
        if persist_path and os.path.isfile(persist_path):
            self._load()

    def _load(self) -> None:
        if not self._persist_path:
            return
        try:
            with open(self._persist_path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log.warning("ignoring unreadable project file %s: %s", self._persist_path, e)
            return
        for p in data.get("projects", []) if isinstance(data, dict) else []:
            try:
                proj = ProjectDescriptor(**p)
            except (TypeError, ValidationError) as e:
                log.warning("skipping malformed project entry in %s: %s", self._persist_path, e)
                continue
            self._projects[proj.name] = proj

    def save(self) -> None:
        """Persist to JSON if path set."""
        if not self._persist_path:
            return
        os.makedirs(os.path.dirname(self._persist_path) or ".", exist_ok=True)
        data = {"projects": [p.model_dump() for p in self._projects.values()]}
        with open(self._persist_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=0)

    def get_project(self, name: str) -> Optional[ProjectDescriptor]:
        return self._projects.get(name)

    def iter_projects(self) -> list[ProjectDescriptor]:
        return list(self._projects.values())

    def upsert_project(self, project: ProjectDescriptor) -> None:
        self._projects[project.name] = project
        self.save()

    def add_version(self, project_name: str, version: VersionDescriptor) -> None:
        project = self._projects.get(project_name)
        if project is None:
            project = ProjectDescriptor(name=project_name)
            self._projects[project_name] = project
        for i, existing in enumerate(project.versions):
            if existing.name == version.name:
                project.versions[i] = version
                break
        else:
            project.versions.append(version)
        self.save()

    def remove_version(self, project_name: str, version_name: str) -> bool:
        project = self._projects.get(project_name)
        if project is None:
            return False
        kept = [v for v in project.versions if v.name != version_name]
        if len(kept) == len(project.versions):
            return False
        if kept:
            project.versions = kept
        else:
            del self._projects[project_name]
        self.save()
        return True

    def count_projects(self) -> int:
        return len(self._projects)
