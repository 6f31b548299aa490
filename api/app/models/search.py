"""Search result models."""

from pydantic import BaseModel, Field


class ProjectSearchResult(BaseModel):
    name: str


class VersionSearchResult(BaseModel):
    """A version-name or tag hit. For tag hits, `version` holds the tag."""

    project: str
    version: str


class SearchResult(BaseModel):
    projects: list[ProjectSearchResult] = Field(default_factory=list)
    versions: list[VersionSearchResult] = Field(default_factory=list)
