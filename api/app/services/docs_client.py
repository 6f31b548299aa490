"""HTTP client for the docs backend (version listing, upload, claim, delete).

Reads degrade to an empty result and log the server message. Mutations raise a
DocsApiError subclass whose message is meant to be shown to the user as-is.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.models.project import ClaimToken, ProjectDescriptor, VersionDescriptor

DEFAULT_BASE_URL = "http://localhost:5000"
API_KEY_HEADER = "Docat-Api-Key"
log = logging.getLogger(__name__)


class DocsApiError(RuntimeError):
    pass


class UpstreamUnavailableError(DocsApiError):
    """504 from the backend; retrying later may work."""


class VersionConflictError(DocsApiError):
    """401 on upload: the version already exists."""


class UnauthorizedError(DocsApiError):
    """401 on delete: the token was rejected."""


class ServerRejectedError(DocsApiError):
    pass


def _env_timeout(default: float = 20.0) -> float:
    raw = (os.getenv("DOCS_API_TIMEOUT") or "").strip()
    if not raw:
        return default
    try:
        return max(0.1, float(raw))
    except ValueError:
        return default


def _server_message(r: httpx.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        return (r.text or "").strip()[:500] or f"HTTP {r.status_code}"
    if isinstance(data, dict):
        msg = data.get("message") or data.get("detail")
        if msg:
            return str(msg)
    return str(data)


def _raise_for_status(r: httpx.Response, action: str, unauthorized: Optional[DocsApiError] = None) -> None:
    if r.is_success:
        return
    if r.status_code == 401 and unauthorized is not None:
        err: DocsApiError = unauthorized
    elif r.status_code == 504:
        err = UpstreamUnavailableError(f"Failed to {action}: Server unreachable")
    else:
        err = ServerRejectedError(f"Failed to {action}: {_server_message(r)}")
    log.warning("docs api %s %s -> %s: %s", r.request.method, r.request.url, r.status_code, err)
    raise err


class DocsClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: str = "docs-portal/1.0",
    ) -> None:
        base_url = base_url or (os.getenv("DOCS_API_BASE_URL") or "").strip() or DEFAULT_BASE_URL
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout if timeout is not None else _env_timeout()
        self._headers = {"Accept": "application/json", "User-Agent": user_agent}

    def _url(self, *parts: str) -> str:
        return self._base_url + "/api/" + "/".join(quote(p, safe="") for p in parts)

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        h = dict(self._headers)
        h.update(kwargs.pop("headers", None) or {})
        with httpx.Client(timeout=self._timeout, headers=h) as client:
            return client.request(method, url, **kwargs)

    def _get_json_or_none(self, url: str) -> Any:
        try:
            r = self._request("GET", url)
        except httpx.HTTPError as e:
            log.error("docs api GET %s failed: %s", url, e)
            return None
        if not r.is_success:
            log.error("docs api GET %s -> %s: %s", url, r.status_code, _server_message(r))
            return None
        try:
            return r.json()
        except ValueError:
            log.error("docs api GET %s returned non-JSON body", url)
            return None

    def get_projects(self) -> list[ProjectDescriptor]:
        """All projects including hidden versions; [] when the backend fails."""
        data = self._get_json_or_none(self._url("projects") + "?include_hidden=true")
        if not isinstance(data, dict):
            return []
        try:
            return [ProjectDescriptor(**p) for p in data.get("projects") or []]
        except (TypeError, ValidationError) as e:
            log.error("docs api project list did not match the expected shape: %s", e)
            return []

    def get_versions(self, project_name: str) -> list[VersionDescriptor]:
        """All versions of a project including hidden ones; [] when the backend fails."""
        data = self._get_json_or_none(self._url("projects", project_name) + "?include_hidden=true")
        if not isinstance(data, dict):
            return []
        try:
            return [VersionDescriptor(**v) for v in data.get("versions") or []]
        except (TypeError, ValidationError) as e:
            log.error("docs api versions of %s did not match the expected shape: %s", project_name, e)
            return []

    def upload(self, project_name: str, version: str, files: dict[str, Any]) -> None:
        """POST documentation files (httpx `files=` mapping) for a new version."""
        r = self._request("POST", self._url(project_name, version), files=files)
        _raise_for_status(
            r,
            "upload documentation",
            unauthorized=VersionConflictError("Failed to upload documentation: Version already exists"),
        )

    def claim(self, project_name: str) -> ClaimToken:
        r = self._request("GET", self._url(project_name, "claim"))
        _raise_for_status(r, "claim project")
        try:
            return ClaimToken(**r.json())
        except (ValueError, TypeError) as e:
            log.warning("docs api claim %s returned an unusable body: %s", project_name, e)
            raise ServerRejectedError(f"Failed to claim project: {_server_message(r)}") from e

    def delete_doc(self, project_name: str, version: str, token: str) -> None:
        r = self._request("DELETE", self._url(project_name, version), headers={API_KEY_HEADER: token})
        _raise_for_status(
            r,
            "delete documentation",
            unauthorized=UnauthorizedError("Failed to delete documentation: Invalid token"),
        )
