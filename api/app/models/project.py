"""Project and version models for the docs portal."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class VersionDescriptor(BaseModel):
    """One documented version of a project."""

    name: str
    tags: list[str] = Field(default_factory=list)
    hidden: bool = False


class ProjectDescriptor(BaseModel):
    """A named documentation project with its versions, in upload order."""

    name: str
    versions: list[VersionDescriptor] = Field(default_factory=list)


class ProjectListing(BaseModel):
    """Row for GET /api/projects."""

    name: str
    versions: list[VersionDescriptor]
    favorite: bool = False
    logo_url: str
    latest: Optional[str] = None


class ClaimToken(BaseModel):
    token: str
