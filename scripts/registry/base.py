"""HTTP session and GitHub API helpers."""

import os
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

GITHUB_API_URL = "https://api.github.com/repos/{path}"
TOKEN_ENV = "GITHUB_TOKEN"


def get_session(retries: int = 0) -> requests.Session:
    """Create a requests session.

    The registry build never retries a failed fetch, so ``retries`` defaults
    to zero; a failed repository simply falls back to manual install.
    """
    session = requests.Session()
    retry = Retry(total=retries, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def get_github_token() -> Optional[str]:
    """Read the optional API token; unauthenticated requests still work."""
    return os.environ.get(TOKEN_ENV) or None


def get_github_headers(token: Optional[str] = None) -> dict:
    """Get headers for GitHub API requests."""
    headers = {"Accept": "application/vnd.github.v3+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers
