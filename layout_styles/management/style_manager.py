#!/usr/bin/env python3
"""Style Management CLI

Command-line utility to inspect the predefined style set, validate and merge
style snapshots, and export the result as JSON.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from layout_styles.config import Config
from layout_styles.exceptions import LayoutStylesError
from layout_styles.logger import DefaultLogger, Logger, session_logger
from layout_styles.styles import StyleCategory, StyleRegistry
from layout_styles.transfer import read_snapshot_file, write_snapshot


def build_registry(args) -> StyleRegistry:
    """Registry seeded from the predefined file, plus ``--snapshot`` when given."""
    registry = StyleRegistry(
        logger=DefaultLogger(level=Config.get_log_level()),
        predefined_file=Path(args.predefined) if args.predefined else None,
    )
    if args.snapshot:
        read_snapshot_file(registry, Path(args.snapshot))
    return registry


def list_styles(args):
    """List stored styles"""
    logger: Logger = session_logger

    try:
        registry = build_registry(args)
        categories = [StyleCategory.parse(args.category)] if args.category else list(StyleCategory)

        for category in categories:
            definitions = registry.list_all(category)
            logger.info(f"{category.label} styles ({len(definitions)}):")

            if args.verbose:
                logger.info(f"  {'ID':<40} {'Name':<24} {'Group':<12} {'Custom':<7} {'Created'}")
                logger.info("  " + "-" * 100)
                for d in definitions:
                    created = d.created_at.isoformat()[:19]
                    group = d.group or "-"
                    logger.info(f"  {d.id:<40} {d.name:<24} {group:<12} {str(d.is_custom):<7} {created}")
            else:
                for d in definitions:
                    logger.info(f"  {d.id}")

        return 0

    except LayoutStylesError as e:
        logger.error(f"Error listing styles: {e.message}")
        return 1


def show_style(args):
    """Print one style definition as JSON"""
    logger: Logger = session_logger

    try:
        registry = build_registry(args)
        definition = registry.require(args.category, args.style_id)
        logger.info(json.dumps(definition.to_export_dict(), indent=2))
        return 0

    except LayoutStylesError as e:
        logger.error(f"Error showing style: {e.message}")
        return 1


def export_styles(args):
    """Export every style as a JSON snapshot"""
    logger: Logger = session_logger

    try:
        registry = build_registry(args)
        output = Path(args.output) if args.output else Config.get_export_dir()
        path = write_snapshot(registry, output)
        logger.info(f"Exported {registry.stats()['total']} style(s) to {path}")
        return 0

    except (LayoutStylesError, OSError) as e:
        logger.error(f"Error exporting styles: {e}")
        return 1


def import_styles(args):
    """Validate and merge a snapshot"""
    logger: Logger = session_logger

    try:
        registry = build_registry(args)
        before = registry.stats()["total"]
        count = read_snapshot_file(registry, Path(args.file))
        after = registry.stats()["total"]

        logger.info(f"Imported {count} style(s) from {args.file}")
        logger.info(f"New styles:       {after - before}")
        logger.info(f"Overwritten:      {count - (after - before)}")
        logger.info(f"Total styles:     {after}")

        if args.output:
            path = write_snapshot(registry, Path(args.output))
            logger.info(f"Merged snapshot written to {path}")
        return 0

    except LayoutStylesError as e:
        logger.error(f"Import failed: {e.message}")
        for problem in e.details.get("problems", []):
            logger.error(f"  {problem}")
        return 1
    except OSError as e:
        logger.error(f"Import failed: {e}")
        return 1


def stats(args):
    """Display registry statistics"""
    logger: Logger = session_logger

    try:
        registry = build_registry(args)
        data = registry.stats()

        logger.info("Style Statistics:")
        logger.info(f"Total styles:     {data['total']}")
        logger.info(f"Custom:           {data['by_custom_status']['custom']}")
        logger.info(f"Predefined:       {data['by_custom_status']['predefined']}")
        logger.info(f"Custom fonts:     {data['custom_fonts']}")

        logger.info("Styles by category:")
        for category, count in data["by_category"].items():
            logger.info(f"  {category:<15} {count:>5} styles")

        logger.info("Styles by group:")
        for group, count in sorted(data["by_group"].items()):
            logger.info(f"  {group:<15} {count:>5} styles")

        if data["recently_modified"]:
            logger.info("Recently modified:")
            for entry in data["recently_modified"]:
                logger.info(f"  {entry['category']:<10} {entry['id']:<40} {entry['updated_at'][:19]}")

        return 0

    except LayoutStylesError as e:
        logger.error(f"Error getting stats: {e.message}")
        return 1


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="layout-styles",
        description="layout-styles Style Manager - Inspect, export and import style snapshots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  layout-styles list --verbose
  layout-styles list --category border
  layout-styles show fill primary
  layout-styles stats

  # Export predefined styles plus a saved snapshot
  layout-styles --snapshot saved.json export --output merged.json

  # Validate a snapshot and write the merged result
  layout-styles import incoming.json --output merged.json

Environment Variables:
    LAYOUT_STYLES_LOG_LEVEL            Log level (default: INFO)
    LAYOUT_STYLES_PREDEFINED_STYLES    Predefined styles YAML file
    LAYOUT_STYLES_EXPORT_DIR           Default export directory
        """,
    )

    # Global arguments
    parser.add_argument(
        "--snapshot",
        type=str,
        default=None,
        help="Snapshot JSON file to load before running the command",
    )
    parser.add_argument(
        "--predefined",
        type=str,
        default=None,
        help="Predefined styles YAML file (default: from LAYOUT_STYLES_PREDEFINED_STYLES)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    list_parser = subparsers.add_parser("list", help="List styles")
    list_parser.add_argument(
        "--category",
        type=str,
        choices=[c.value for c in StyleCategory],
        help="Only list one category",
    )
    list_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show names, groups and creation times",
    )

    show_parser = subparsers.add_parser("show", help="Show one style as JSON")
    show_parser.add_argument("category", choices=[c.value for c in StyleCategory])
    show_parser.add_argument("style_id")

    export_parser = subparsers.add_parser("export", help="Export styles as a JSON snapshot")
    export_parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file or directory (default: LAYOUT_STYLES_EXPORT_DIR or cwd)",
    )

    import_parser = subparsers.add_parser("import", help="Validate and merge a snapshot")
    import_parser.add_argument("file", help="Snapshot JSON file")
    import_parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write the merged registry to this file or directory",
    )

    subparsers.add_parser("stats", help="Show style statistics")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "list":
        return list_styles(args)
    elif args.command == "show":
        return show_style(args)
    elif args.command == "export":
        return export_styles(args)
    elif args.command == "import":
        return import_styles(args)
    elif args.command == "stats":
        return stats(args)

    logger: Logger = session_logger
    logger.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
