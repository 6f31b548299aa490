"""Pydantic models."""

from app.models.error import ErrorDetail
from app.models.project import ClaimToken, ProjectDescriptor, ProjectListing, VersionDescriptor
from app.models.search import ProjectSearchResult, SearchResult, VersionSearchResult

__all__ = [
    "ClaimToken",
    "ErrorDetail",
    "ProjectDescriptor",
    "ProjectListing",
    "ProjectSearchResult",
    "SearchResult",
    "VersionDescriptor",
    "VersionSearchResult",
]
