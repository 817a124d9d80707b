"""
api — HTTP client for the issues API, URL builder, and response schemas.

Every endpoint has the same shape:

    {base}/{method}/{username}/{project}/{param}

Reads are GETs. Writes are form-encoded POSTs that carry the login and
token in the body. All responses are JSON.
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError, field_validator

from .config import api_base
from .errors import ApiError, ResponseShapeError

log = logging.getLogger(__name__)


# ── Response schemas ─────────────────────────────────────────────────────

class Issue(BaseModel):
    number: int
    title: str
    body: Optional[str] = ""
    state: Optional[str] = None


class IssueListResponse(BaseModel):
    issues: list[Issue] = []

    @field_validator("issues", mode="before")
    @classmethod
    def _null_is_empty(cls, value):
        return [] if value is None else value


class IssueResponse(BaseModel):
    issue: Optional[Issue] = None


# ── URL builder ──────────────────────────────────────────────────────────

def build_url(base, method, username, project, param=""):
    """Join the path segments, escaping each one.

    An empty *param* leaves a trailing slash, which the open endpoint expects.
    """
    segments = [method, username, project, str(param)]
    return base.rstrip("/") + "/" + "/".join(quote(s, safe="") for s in segments)


# ── Client ───────────────────────────────────────────────────────────────

class ApiClient:
    """One requests session bound to a user and a project."""

    def __init__(self, credentials, project, base=None, session=None, timeout=None):
        self.credentials = credentials
        self.project = project
        self.base = base or api_base()
        # requests honours http_proxy / https_proxy from the environment
        self.session = session or requests.Session()
        self.timeout = timeout

    def url(self, method, param=""):
        return build_url(self.base, method, self.credentials.username, self.project, param)

    def get(self, method, param=""):
        url = self.url(method, param)
        log.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ApiError(f"GET {url} failed: {exc}") from exc
        return _decode(response)

    def post(self, method, param="", fields=None):
        url = self.url(method, param)
        form = {
            "login": self.credentials.username,
            "token": self.credentials.api_token,
            **(fields or {}),
        }
        log.debug("POST %s fields=%s", url, sorted(k for k in form if k != "token"))
        try:
            response = self.session.post(url, data=form, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ApiError(f"POST {url} failed: {exc}") from exc
        return _decode(response)

    # ── Typed reads ──────────────────────────────────────────────────────

    def list_issues(self):
        return _validate(IssueListResponse, self.get("list", "open")).issues

    def show_issue(self, number):
        return _validate(IssueResponse, self.get("show", number)).issue


def _decode(response):
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise ApiError(f"{response.status_code} from {response.url}") from exc
    try:
        return response.json()
    except ValueError as exc:
        raise ApiError(f"Response from {response.url} is not JSON") from exc


def _validate(model, data):
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ResponseShapeError(
            f"Unexpected {model.__name__} shape: {exc.error_count()} error(s)\n{exc}"
        ) from exc
