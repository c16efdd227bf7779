"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

CATALOG = """# Awesome MCP Servers

A curated list, see [the spec](https://modelcontextprotocol.io).

- [early/bird](https://github.com/early/bird) - Listed before any category

## Server Implementations

### 🗄️ <a name="databases"></a>Databases

- [acme/db](https://github.com/acme/db) 🐍 🏠 - A database server
- [Not GitHub](https://gitlab.com/foo/bar) - Hosted elsewhere

### 🧩 <a name="unmapped-section"></a>Unmapped

- [other/tool](https://github.com/other/tool/) - Keeps the database category
- not a list item

### 🔗 <a name="aggregators"></a>Aggregators

- [Filesystem](https://github.com/modelcontextprotocol/servers/tree/main/src/filesystem) 📇 - Reference server
- [dup](https://github.com/x/y) - see [docs](https://github.com/x/docs)
"""


@pytest.fixture
def catalog_text():
    """Small catalog covering headings, carry-over and skipped lines."""
    return CATALOG


@pytest.fixture
def make_response():
    """Factory for fake requests responses."""

    def _make(status_code=200, payload=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        response.json.return_value = payload if payload is not None else {}
        return response

    return _make


@pytest.fixture
def session():
    """Mock requests session."""
    return MagicMock()
