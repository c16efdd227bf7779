"""Enrich plugins with live GitHub repository metadata."""

import sys
import time
from typing import Optional

import requests

from models import GitHubRepo, Plugin
from registry.base import GITHUB_API_URL, get_github_headers, get_session
from registry.catalog import GITHUB_PREFIX

# Hosts many servers; repository metadata says nothing about installing any one of them
MONOREPO = "modelcontextprotocol/servers"


def _second_segment(repo_path: str) -> str:
    parts = repo_path.split("/")
    return parts[1] if len(parts) >= 2 else ""


# Lowercased primary language -> (install type, locator builder)
INSTALLERS = {
    "python": ("pip", _second_segment),
    "typescript": ("npm", lambda repo_path: repo_path),
    "javascript": ("npm", lambda repo_path: repo_path),
    "go": ("go", lambda repo_path: f"github.com/{repo_path}@latest"),
}


def clean_repo_path(repository: str) -> str:
    """Reduce a GitHub URL to ``owner/name``.

    Handles URLs pointing into a subdirectory or file, e.g.
    ``https://github.com/org/repo/tree/main/src/x`` -> ``org/repo``.
    """
    path = repository
    if path.startswith(GITHUB_PREFIX):
        path = path[len(GITHUB_PREFIX):]
    if path.endswith("/"):
        path = path[:-1]

    for marker in ("/tree/", "/blob/"):
        idx = path.find(marker)
        if idx != -1:
            path = path[:idx]

    return path


def detect_install_type(language: Optional[str], repo_path: str) -> tuple[str, str]:
    """Return ``(install_type, package)`` for a repository's primary language."""
    installer = INSTALLERS.get((language or "").lower())
    if installer is None:
        return "manual", ""

    install_type, locator = installer
    return install_type, locator(repo_path)


def is_monorepo(repo_path: str) -> bool:
    path = repo_path.lower()
    return path == MONOREPO or path.startswith(MONOREPO + "/")


class GitHubEnricher:
    """Fill popularity, language, license and install info from the GitHub API.

    Repositories are fetched one at a time with a fixed pause after each
    request. A failed fetch never aborts the batch: the plugin keeps its
    defaults with a manual install type.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        token: Optional[str] = None,
        delay: float = 0.1,
        timeout: float = 10,
        verbose: bool = True,
    ):
        self.session = session or get_session()
        self.headers = get_github_headers(token)
        self.delay = delay
        self.timeout = timeout
        self.verbose = verbose
        self.errors: list[str] = []

    def fetch(self, repo_path: str) -> GitHubRepo:
        """Fetch repository metadata.

        Raises:
            requests.RequestException: On network errors or a non-200 status.
            ValueError: If the body is not the expected JSON.
        """
        url = GITHUB_API_URL.format(path=repo_path)
        response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        if response.status_code != 200:
            raise requests.HTTPError(
                f"GitHub API returned {response.status_code}: {response.text[:200]}",
                response=response,
            )
        return GitHubRepo.model_validate(response.json())

    def enrich(self, plugin: Plugin) -> bool:
        """Enrich a single plugin in place. Returns False if the fetch failed."""
        repo_path = clean_repo_path(plugin.repository)

        try:
            repo = self.fetch(repo_path)
        except (requests.RequestException, ValueError) as e:
            message = f"Failed to fetch GitHub data for {repo_path}: {e}"
            print(f"Warning: {message}", file=sys.stderr)
            self.errors.append(message)
            plugin.install_type = "manual"
            plugin.package = ""
            return False

        plugin.popularity = repo.stargazers_count
        plugin.primary_language = repo.language or ""
        if repo.license is not None and repo.license.spdx_id:
            plugin.license = repo.license.spdx_id
        if repo.pushed_at is not None:
            plugin.updated_at = repo.pushed_at

        plugin.install_type, plugin.package = detect_install_type(repo.language, repo_path)

        if is_monorepo(repo_path):
            plugin.install_type = "manual"
            if not plugin.package:
                plugin.package = MONOREPO

        return True

    def run(self, plugins: list[Plugin]) -> list[Plugin]:
        """Enrich every plugin in order, pausing ``delay`` seconds after each."""
        total = len(plugins)
        for i, plugin in enumerate(plugins, 1):
            if self.verbose:
                print(f"[{i}/{total}] {plugin.repository}")
            self.enrich(plugin)
            time.sleep(self.delay)

        return plugins
