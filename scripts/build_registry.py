#!/usr/bin/env python3
"""Build the plugin registry JSON from an awesome-list catalog.

Usage:
    python build_registry.py README.md registry.json
    python build_registry.py README.md registry.json custom-plugins.json
    python build_registry.py README.md registry.json --skip-enrich --quiet

Set GITHUB_TOKEN to raise the GitHub API rate limit.
"""

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Optional

from tabulate import tabulate

# Add scripts directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from models import CATEGORIES, Plugin
from registry.base import get_github_token
from registry.catalog import parse_catalog
from registry.enrich import GitHubEnricher
from registry.merge import load_overrides, merge_plugins, write_registry


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


class ArgumentParser(argparse.ArgumentParser):
    """Exit with status 1 on bad arguments, like every other fatal error."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Build the plugin registry from a markdown catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s README.md registry.json                     # Catalog only
    %(prog)s README.md registry.json custom-plugins.json # With overrides
    %(prog)s README.md registry.json --skip-enrich       # No GitHub calls
        """,
    )
    parser.add_argument("catalog", type=Path, help="Input catalog markdown")
    parser.add_argument("output", type=Path, help="Output registry JSON")
    parser.add_argument(
        "custom",
        type=Path,
        nargs="?",
        default=None,
        help="Optional JSON array of override plugins",
    )
    parser.add_argument(
        "--overrides",
        type=Path,
        default=None,
        help="Override plugins file (same as the third positional argument)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.1,
        help="Seconds to wait after each GitHub request (default: 0.1)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10,
        help="Per-request timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--limit",
        type=positive_int,
        default=None,
        help="Only take the first N catalog entries (default: none)",
    )
    parser.add_argument(
        "--skip-enrich",
        action="store_true",
        help="Skip GitHub metadata lookups",
    )
    parser.add_argument(
        "--enrich-overrides",
        action="store_true",
        help="Also look up GitHub metadata for override plugins",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print warnings, errors and the final line",
    )
    return parser


def print_summary(plugins: list[Plugin], failed: int) -> None:
    """Print plugin counts per category and install type."""
    categories = Counter(p.category for p in plugins)
    installs = Counter(p.install_type for p in plugins)

    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    print(
        tabulate(
            [[c, categories[c]] for c in CATEGORIES if categories[c]],
            headers=["Category", "Plugins"],
            tablefmt="grid",
        )
    )
    print(
        tabulate(
            sorted(installs.items()),
            headers=["Install type", "Plugins"],
            tablefmt="grid",
        )
    )
    official = sum(1 for p in plugins if p.official)
    print(f"\nTotal: {len(plugins)} plugins ({official} official, {failed} failed lookups)")


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.custom and args.overrides and args.custom != args.overrides:
        parser.error("override file given twice with different paths")
    overrides_path = args.overrides or args.custom

    try:
        content = args.catalog.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to read catalog {args.catalog}: {e}", file=sys.stderr)
        return 1

    # Load overrides before any network work so a bad file fails fast
    overrides = None
    if overrides_path:
        try:
            overrides = load_overrides(overrides_path)
        except (OSError, ValueError) as e:
            print(f"Error: Failed to load override plugins: {e}", file=sys.stderr)
            return 1

    plugins = parse_catalog(content, limit=args.limit)
    print(f"Parsed {len(plugins)} plugins from {args.catalog}")

    failed = 0
    if not args.skip_enrich:
        enricher = GitHubEnricher(
            token=get_github_token(),
            delay=args.delay,
            timeout=args.timeout,
            verbose=not args.quiet,
        )
        enricher.run(plugins)
        if overrides and args.enrich_overrides:
            enricher.run(overrides)
        failed = len(enricher.errors)

    if overrides is not None:
        plugins = merge_plugins(plugins, overrides)
        print(f"Merged {len(overrides)} override plugins")

    try:
        ranked = write_registry(plugins, args.output)
    except OSError as e:
        print(f"Error: Failed to write {args.output}: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print_summary(ranked, failed)

    print(f"Successfully generated {args.output} with {len(ranked)} plugins")
    return 0


if __name__ == "__main__":
    sys.exit(main())
