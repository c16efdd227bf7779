"""Heading anchor -> canonical category table for the awesome-mcp-servers catalog."""

# Anchors missing from this table keep the previous section's category.
CATEGORY_MAP = {
    # Canonical tags map to themselves
    "productivity": "productivity",
    "development": "development",
    "ai": "ai",
    "data": "data",
    "finance": "finance",
    "communication": "communication",
    "security": "security",
    "utility": "utility",
    "integration": "integration",
    # Catalog section anchors
    "aggregators": "utility",
    "aerospace-and-astrodynamics": "productivity",
    "art-and-culture": "productivity",
    "bio": "data",
    "browser-automation": "development",
    "cloud-platforms": "integration",
    "code-execution": "development",
    "coding-agents": "development",
    "command-line": "development",
    "customer-data-platforms": "data",
    "databases": "data",
    "data-platforms": "data",
    "developer-tools": "development",
    "delivery": "integration",
    "data-science-tools": "data",
    "embedded-system": "development",
    "file-systems": "utility",
    "finance--fintech": "finance",
    "gaming": "productivity",
    "knowledge--memory": "ai",
    "location-services": "integration",
    "marketing": "productivity",
    "monitoring": "development",
    "multimedia-process": "productivity",
    "news--information": "productivity",
    "productivity-and-organization": "productivity",
    "project-management": "productivity",
    "search": "utility",
    "smart-home": "integration",
    "security-and-privacy": "security",
    "social-media": "communication",
    "sports": "productivity",
    "testing": "development",
    "travel": "productivity",
    "version-control": "development",
    "web-automation": "development",
    "web3--blockchain": "integration",
}


def normalize_category(anchor: str, current: str) -> str:
    """Map a heading anchor to a canonical tag, or keep ``current``."""
    return CATEGORY_MAP.get(anchor, current)
