"""Version ordering and latest-version resolution.

Ordering policy, first rule that applies wins:
- a version tagged "latest" sorts above everything else (two tagged versions tie)
- names that both coerce to semver compare by semver precedence
- anything else compares by plain string order of the raw names
"""

from __future__ import annotations

import functools
import re
from typing import Any, Iterable, Mapping, Optional, Sequence

import semver

from app.models.project import ProjectDescriptor, VersionDescriptor

LATEST = "latest"

# First major[.minor[.patch]] run of ASCII digits, not glued to other digits.
_COERCE_RE = re.compile(r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])", re.ASCII)


class InvalidInputError(ValueError):
    pass


def _field(version: Any, key: str, default: Any = None) -> Any:
    if isinstance(version, Mapping):
        return version.get(key, default)
    return getattr(version, key, default)


def _has_latest_tag(version: Any) -> bool:
    return LATEST in (_field(version, "tags") or [])


def coerce_semver(name: str) -> Optional[semver.Version]:
    """Pull a semver triple out of a loosely formatted name.

    "v1.2" -> 1.2.0, "release-3.4.5+build7" -> 3.4.5, "dev" -> None.
    Pre-release and build parts are dropped.
    """
    match = _COERCE_RE.search(name or "")
    if match is None:
        return None
    major, minor, patch = match.groups()
    return semver.Version(int(major), int(minor or 0), int(patch or 0))


def compare_versions(a: Any, b: Any) -> int:
    """Return -1, 0 or 1. Accepts VersionDescriptor objects or {name, tags} mappings."""
    a_latest = _has_latest_tag(a)
    b_latest = _has_latest_tag(b)
    if a_latest and b_latest:
        return 0
    if a_latest:
        return 1
    if b_latest:
        return -1

    a_name = _field(a, "name", "")
    b_name = _field(b, "name", "")
    a_sem = coerce_semver(a_name)
    b_sem = coerce_semver(b_name)
    if a_sem is None or b_sem is None:
        return (a_name > b_name) - (a_name < b_name)
    return a_sem.compare(b_sem)


version_sort_key = functools.cmp_to_key(compare_versions)


def sort_versions(versions: Iterable[Any], descending: bool = False) -> list:
    """Return a new list ordered by compare_versions. The input is not touched."""
    return sorted(versions, key=version_sort_key, reverse=descending)


def filter_hidden_versions(projects: Iterable[ProjectDescriptor]) -> list[ProjectDescriptor]:
    """Copy projects without hidden versions, dropping projects left empty."""
    out: list[ProjectDescriptor] = []
    for project in projects:
        copy = project.model_copy(deep=True)
        copy.versions = [v for v in copy.versions if not v.hidden]
        if copy.versions:
            out.append(copy)
    return out


def get_latest_version(versions: Sequence[VersionDescriptor]) -> VersionDescriptor:
    """Pick the version a project shows by default.

    Order of precedence: a name containing "latest", a "latest" tag, then the
    highest version by compare_versions.
    """
    if not versions:
        raise InvalidInputError("cannot resolve the latest version of an empty version list")

    for version in versions:
        if LATEST in version.name:
            return version
    for version in versions:
        if LATEST in version.tags:
            return version
    return sort_versions(versions)[-1]


def visible_versions(project: ProjectDescriptor) -> list[VersionDescriptor]:
    """Non-hidden versions, newest first."""
    return sort_versions((v for v in project.versions if not v.hidden), descending=True)
