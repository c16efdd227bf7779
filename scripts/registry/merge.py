"""Override loading, merging and ranked output of the registry."""

import json
from pathlib import Path

from models import Plugin
from registry.catalog import extract_author, generate_id


def backfill(plugin: Plugin) -> Plugin:
    """Derive a missing id or author from the plugin's own name and repository."""
    if not plugin.id:
        plugin.id = generate_id(plugin.name)
    if not plugin.author:
        plugin.author = extract_author(plugin.repository)
    return plugin


def load_overrides(path: Path) -> list[Plugin]:
    """Load operator-supplied plugins from a JSON array.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If it is not a JSON array of valid plugin objects.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of plugins")

    return [backfill(Plugin.model_validate(item)) for item in data]


def merge_plugins(plugins: list[Plugin], overrides: list[Plugin]) -> list[Plugin]:
    """Merge two plugin sets keyed by repository URL.

    An override replaces the whole catalog entry with the same repository;
    no field-level merging is done.
    """
    merged: dict[str, Plugin] = {}
    for plugin in plugins:
        merged[plugin.repository] = plugin
    for plugin in overrides:
        merged[plugin.repository] = plugin
    return list(merged.values())


def rank_plugins(plugins: list[Plugin]) -> list[Plugin]:
    """Official first, then most stars, then name."""
    return sorted(plugins, key=lambda p: (not p.official, -p.popularity, p.name))


def write_registry(plugins: list[Plugin], path: Path) -> list[Plugin]:
    """Rank plugins and write them as a pretty-printed JSON array."""
    ranked = rank_plugins(plugins)
    data = json.dumps([plugin.to_json() for plugin in ranked], indent=2, ensure_ascii=False)

    with open(path, "w", encoding="utf-8") as f:
        f.write(data + "\n")

    return ranked
