"""Plugin registry build pipeline."""

from registry.catalog import extract_author, generate_id, parse_catalog
from registry.enrich import GitHubEnricher, clean_repo_path, detect_install_type
from registry.merge import load_overrides, merge_plugins, rank_plugins, write_registry

__all__ = [
    "parse_catalog",
    "generate_id",
    "extract_author",
    "GitHubEnricher",
    "clean_repo_path",
    "detect_install_type",
    "load_overrides",
    "merge_plugins",
    "rank_plugins",
    "write_registry",
]
