# -*- coding: utf-8 -*-
"""
CLI for inspecting the reference catalogs.

Usage:
    python -m healthdash search foods <query>
    python -m healthdash search exercises <query>
    python -m healthdash stats
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Dict, List, Optional

from .config import settings
from .dashboard import Dashboard


def _load(dashboard: Dashboard) -> Dict[str, str]:
    errors = asyncio.run(dashboard.load_catalogs())
    for name, message in errors.items():
        print(f"Error: {name} catalog unavailable: {message}")
    return errors


def cmd_search(args: argparse.Namespace) -> int:
    """Search a catalog by name."""
    dashboard = Dashboard()
    errors = _load(dashboard)
    if args.catalog in errors:
        return 1

    query = " ".join(args.query)
    if args.catalog == "foods":
        results = dashboard.search_foods(query)
    else:
        results = dashboard.search_exercises(query)

    if not results:
        print("No matches found.")
        return 0

    for i, item in enumerate(results, 1):
        if args.catalog == "foods":
            print(
                f"[{i}] {item.name} ({item.serving_size or 'serving'}): "
                f"{item.calories:.0f} cal, {item.protein_g:.1f}g protein, "
                f"{item.carbs_g:.1f}g carbs, {item.fat_g:.1f}g fat"
            )
        else:
            print(f"[{i}] {item.name} [{item.category}] metric: {item.progress_metric}")

    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Show catalog sizes."""
    dashboard = Dashboard()
    status = 1 if _load(dashboard) else 0

    print(f"Foods: {len(dashboard.foods)} ({settings.food_catalog_url})")
    print(f"Exercises: {len(dashboard.exercises)} ({settings.exercise_catalog_url})")

    return status


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Health dashboard catalog CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # search command
    search_parser = subparsers.add_parser("search", help="Search a catalog by name")
    search_parser.add_argument("catalog", choices=["foods", "exercises"], help="Catalog to search")
    search_parser.add_argument("query", nargs="*", help="Search query (empty lists the first rows)")

    # stats command
    subparsers.add_parser("stats", help="Show catalog sizes")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "search": cmd_search,
        "stats": cmd_stats,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
