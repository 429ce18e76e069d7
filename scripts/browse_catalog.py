#!/usr/bin/env python3
"""Script to filter a store catalog from the command line."""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mocks.data_generator import MockDataGenerator
from src.config import configure_logging, get_settings
from src.ingestion.loader import CatalogLoader
from src.search import FilterEngine, suggest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Filter a store listing catalog and print the matching stores"
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Path to a JSON catalog file (defaults to CATALOG_PATH)",
    )
    parser.add_argument(
        "--mock",
        type=int,
        metavar="COUNT",
        help="Use a generated catalog of COUNT stores instead of a file",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --mock")
    parser.add_argument("--query", "-q", default="", help="Free-text search term")
    parser.add_argument("--day", default="", help="Pickup day, e.g. Today")
    parser.add_argument("--window", default="", help="Pickup window, e.g. Lunch")
    parser.add_argument(
        "--food-type",
        action="append",
        default=[],
        help="Food type to include (repeatable)",
    )
    parser.add_argument(
        "--diet",
        action="append",
        default=[],
        help="Dietary tag to include (repeatable)",
    )
    parser.add_argument(
        "--cuisine",
        action="append",
        default=[],
        help="Cuisine to include (repeatable)",
    )
    parser.add_argument("--distance", type=float, default=None, help="Maximum distance in miles")
    parser.add_argument("--price", default=None, help="Price bucket, e.g. $$")
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Print search suggestions for --query",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    loader = CatalogLoader()
    if args.mock:
        catalog = loader.load_data(MockDataGenerator(seed=args.seed).generate_catalog(args.mock))
    else:
        source = args.source or settings.catalog_path
        if not source:
            print("Error: no catalog given (pass a path, --mock or set CATALOG_PATH)")
            return 1
        source_path = Path(source)
        if not source_path.exists():
            print(f"Error: Catalog does not exist: {source_path}")
            return 1
        catalog = loader.load_file(source_path)

    engine = FilterEngine()
    engine.set_field("query", args.query)
    engine.set_field("pickup_day", args.day)
    engine.set_field("pickup_window", args.window)
    engine.set_field("food_types", args.food_type)
    engine.set_field("diet", args.diet)
    engine.set_field("cuisines", args.cuisine)
    engine.set_field("distance", args.distance)
    engine.set_field("price", args.price)

    if args.suggest and args.query:
        print("Suggestions:")
        for suggestion in suggest(args.query, catalog):
            print(f"  - {suggestion.text} ({suggestion.type})")
        print()

    count = engine.active_filter_count()
    if count:
        chips = ", ".join(chip.label for chip in engine.active_filter_chips())
        print(f"{count} active filter{'s' if count > 1 else ''}: {chips}")

    results = engine.evaluate(catalog)
    if not results:
        print("No results found")
        return 0

    print(f"{len(results)} store{'s' if len(results) != 1 else ''} found")
    for store in results:
        print(
            f"  [{store.id}] {store.name} - {store.cuisine}, {store.food_type}, "
            f"{store.price_bucket}, {store.distance_mi} mi, "
            f"{store.pickup_day} {store.pickup_window}"
        )

    stats = loader.stats
    if stats["records_skipped"]:
        print(f"\nSkipped {stats['records_skipped']} invalid record(s)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
