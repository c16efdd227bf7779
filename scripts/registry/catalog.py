"""Plugin extraction from an awesome-list style markdown catalog."""

import re
from typing import Optional

from bs4 import BeautifulSoup

from models import DEFAULT_CATEGORY, Plugin
from registry.categories import normalize_category

GITHUB_PREFIX = "https://github.com/"

# Authors whose plugins are flagged official
OFFICIAL_AUTHORS = {"anthropics", "modelcontextprotocol"}

HEADING_RE = re.compile(r"^#{1,6}\s")
# - [name](url) <anything> - description
ITEM_RE = re.compile(r"^\s*-\s*\[([^\]]+)\]\(([^)]+)\).*?-\s*(.+)")
LINK_RE = re.compile(r"\[[^\]]*\]\([^)]*\)")
SLUG_RE = re.compile(r"[^a-z0-9]+")


def generate_id(name: str) -> str:
    """Lowercase slug of a plugin name, e.g. 'My Plugin!' -> 'my-plugin'."""
    return SLUG_RE.sub("-", name.lower()).strip("-")


def extract_author(repository: str) -> str:
    """First path segment of a GitHub URL, or '' when there is none."""
    path = repository
    if path.startswith(GITHUB_PREFIX):
        path = path[len(GITHUB_PREFIX):]
    return path.split("/")[0]


def is_official(author: str) -> bool:
    return author.lower() in OFFICIAL_AUTHORS


def heading_anchor(line: str) -> Optional[str]:
    """Return the ``<a name="...">`` anchor embedded in a heading line."""
    anchor = BeautifulSoup(line, "html.parser").find("a", attrs={"name": True})
    if anchor is None:
        return None
    return anchor["name"]


def parse_catalog(content: str, limit: Optional[int] = None) -> list[Plugin]:
    """Extract plugins from catalog markdown.

    Headings carrying a known anchor switch the current category; list items
    of the form ``- [name](https://github.com/...) ... - description`` become
    plugins. Everything else is skipped.

    Args:
        content: Catalog markdown text.
        limit: Optional limit on number of plugins.

    Returns:
        List of Plugin objects in catalog order.
    """
    plugins = []
    current_category = DEFAULT_CATEGORY

    for line in content.splitlines():
        if limit is not None and len(plugins) >= limit:
            break

        if HEADING_RE.match(line):
            anchor = heading_anchor(line)
            if anchor:
                current_category = normalize_category(anchor, current_category)
            continue

        match = ITEM_RE.match(line)
        if not match:
            continue

        # One link per entry; anything richer is not a catalog item
        if len(LINK_RE.findall(line)) > 1:
            continue

        name, repository, description = (group.strip() for group in match.groups())
        if not name or not repository.startswith(GITHUB_PREFIX):
            continue

        author = extract_author(repository)
        plugins.append(
            Plugin(
                id=generate_id(name),
                name=name,
                description=description,
                category=current_category,
                repository=repository,
                author=author,
                official=is_official(author),
            )
        )
    return plugins
