"""Portal URL helpers for project logos and rendered docs."""

from __future__ import annotations

from typing import Optional

RESOURCE = "doc"


def project_logo_url(project: str) -> str:
    return f"/{RESOURCE}/{project}/logo"


def project_docs_url(project: str, version: str, docs_path: Optional[str] = None) -> str:
    return f"/{RESOURCE}/{project}/{version}/{docs_path or ''}"
