"""Error body returned with 400 and 404 responses."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Single top-level `detail` string, e.g. {"detail": "Project not found"}."""

    detail: str
