"""Tests for override loading, merging, ranking and output."""

import json

import pytest
from pydantic import ValidationError

from models import Plugin
from registry.catalog import parse_catalog
from registry.merge import (
    backfill,
    load_overrides,
    merge_plugins,
    rank_plugins,
    write_registry,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ============================================
# Override Loading Tests
# ============================================


class TestLoadOverrides:
    """Tests for operator-supplied plugin files."""

    def test_backfills_id_and_author(self, tmp_path):
        path = write_json(
            tmp_path / "custom.json",
            [{"name": "My Tool", "repository": "https://github.com/me/tool"}],
        )
        [plugin] = load_overrides(path)

        assert plugin.id == "my-tool"
        assert plugin.author == "me"

    def test_keeps_given_id_and_author(self, tmp_path):
        path = write_json(
            tmp_path / "custom.json",
            [
                {
                    "id": "custom-id",
                    "name": "My Tool",
                    "author": "someone",
                    "repository": "https://github.com/me/tool",
                    "verified": True,
                    "stars": 7,
                    "language": "Go",
                }
            ],
        )
        [plugin] = load_overrides(path)

        assert plugin.id == "custom-id"
        assert plugin.author == "someone"
        assert plugin.verified is True
        assert plugin.popularity == 7
        assert plugin.primary_language == "Go"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_overrides(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_overrides(path)

    def test_not_an_array(self, tmp_path):
        path = write_json(tmp_path / "custom.json", {"name": "x"})
        with pytest.raises(ValueError, match="JSON array"):
            load_overrides(path)

    def test_missing_repository(self, tmp_path):
        path = write_json(tmp_path / "custom.json", [{"name": "x"}])
        with pytest.raises(ValidationError):
            load_overrides(path)

    def test_unknown_category(self, tmp_path):
        path = write_json(
            tmp_path / "custom.json",
            [{"name": "x", "repository": "https://github.com/a/x", "category": "databases"}],
        )
        with pytest.raises(ValidationError):
            load_overrides(path)

    def test_backfill_no_path(self):
        plugin = backfill(Plugin(name="Bare", repository="https://github.com/"))
        assert plugin.id == "bare"
        assert plugin.author == ""


# ============================================
# Merge Tests
# ============================================


class TestMergePlugins:
    """Tests for repository-keyed merging."""

    def test_override_replaces_whole_record(self):
        extracted = Plugin(
            name="db",
            description="from catalog",
            repository="https://github.com/acme/db",
            license="MIT",
            popularity=10,
        )
        override = Plugin(name="Acme DB", repository="https://github.com/acme/db")

        [merged] = merge_plugins([extracted], [override])

        assert merged is override
        assert merged.license is None
        assert merged.popularity == 0

    def test_size_is_distinct_repositories(self):
        extracted = [
            Plugin(name="a", repository="https://github.com/x/a"),
            Plugin(name="b", repository="https://github.com/x/b"),
        ]
        overrides = [
            Plugin(name="b2", repository="https://github.com/x/b"),
            Plugin(name="c", repository="https://github.com/x/c"),
        ]
        merged = merge_plugins(extracted, overrides)

        assert [p.name for p in merged] == ["a", "b2", "c"]

    def test_same_name_different_repository_kept(self):
        """Only the repository is identity; equal ids are not merged."""
        merged = merge_plugins(
            [Plugin(id="tool", name="tool", repository="https://github.com/x/tool")],
            [Plugin(id="tool", name="tool", repository="https://github.com/y/tool")],
        )
        assert len(merged) == 2

    def test_no_overrides(self):
        extracted = [Plugin(name="a", repository="https://github.com/x/a")]
        assert merge_plugins(extracted, []) == extracted


# ============================================
# Ranking Tests
# ============================================


class TestRankPlugins:
    """Tests for output ordering."""

    def test_official_then_popularity(self):
        plugins = [
            Plugin(name="a", repository="https://github.com/o/a", official=True, popularity=5),
            Plugin(name="b", repository="https://github.com/o/b", official=False, popularity=100),
            Plugin(name="c", repository="https://github.com/o/c", official=True, popularity=1),
        ]
        ranked = rank_plugins(plugins)
        assert [(p.official, p.popularity) for p in ranked] == [
            (True, 5),
            (True, 1),
            (False, 100),
        ]

    def test_name_breaks_ties(self):
        plugins = [
            Plugin(name=name, repository=f"https://github.com/o/{name}", popularity=3)
            for name in ["beta", "Zeta", "alpha"]
        ]
        assert [p.name for p in rank_plugins(plugins)] == ["Zeta", "alpha", "beta"]


# ============================================
# Output Tests
# ============================================


class TestWriteRegistry:
    """Tests for the emitted JSON document."""

    def test_wire_format(self, tmp_path):
        path = tmp_path / "registry.json"
        write_registry(
            [Plugin(id="a", name="a", repository="https://github.com/o/a", popularity=2)],
            path,
        )
        [entry] = json.loads(path.read_text(encoding="utf-8"))

        assert entry["stars"] == 2
        assert entry["language"] == ""
        assert entry["install_type"] == "manual"
        assert entry["updated_at"] == "0001-01-01T00:00:00Z"
        assert "license" not in entry
        assert "tags" not in entry

    def test_pretty_printed_and_ranked(self, tmp_path):
        path = tmp_path / "registry.json"
        write_registry(
            [
                Plugin(name="low", repository="https://github.com/o/low", popularity=1),
                Plugin(name="high", repository="https://github.com/o/high", popularity=9),
            ],
            path,
        )
        text = path.read_text(encoding="utf-8")

        assert text.startswith("[\n  {")
        assert [e["name"] for e in json.loads(text)] == ["high", "low"]

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text("stale content that is longer than the new document" * 50)
        write_registry([], path)
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(OSError):
            write_registry([], tmp_path / "missing" / "registry.json")

    def test_rerun_with_output_as_overrides_is_idempotent(self, tmp_path, catalog_text):
        """Feeding the registry back in as overrides reproduces it exactly."""
        first = tmp_path / "first.json"
        second = tmp_path / "second.json"

        plugins = parse_catalog(catalog_text)
        plugins[1].license = "MIT"
        plugins[1].tags = ["sql", "local"]
        plugins[1].popularity = 12
        write_registry(plugins, first)

        overrides = load_overrides(first)
        write_registry(merge_plugins(parse_catalog(catalog_text), overrides), second)

        assert second.read_text(encoding="utf-8") == first.read_text(encoding="utf-8")
