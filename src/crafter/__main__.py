"""
Catalog command line.

Usage:
    # Load and link the catalog, report counts or the first error
    python -m crafter check
    python -m crafter check --data-dir path/to/data

    # Print one linked record as JSON
    python -m crafter show recipe ring
    python -m crafter show property_type oak
"""

from __future__ import annotations

import argparse
import json
import sys

from . import _bootstrap as bs
from .catalog import CatalogError, RecordKind


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crafter",
        description="Load and inspect an item generation catalog",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config file (default: $CRAFTER_CONFIG or config.yaml)",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Catalog directory (overrides catalog.data_dir)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("check", help="Load the catalog and report record counts")

    show = sub.add_parser("show", help="Print one linked record as JSON")
    show.add_argument("kind", choices=[k.value for k in RecordKind])
    show.add_argument("name")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config, config_path = bs.load_config(args.config)
    except ValueError as e:
        print(f"error: bad config: {e}", file=sys.stderr)
        return 1
    if args.verbose:
        config.logging.level = "DEBUG"
    bs.configure_logging(config)

    try:
        catalog, data_dir = bs.build_catalog(config, config_path, data_dir=args.data_dir)
    except CatalogError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.command == "check":
        print(f"Catalog OK: {data_dir}")
        for kind, count in catalog.counts().items():
            print(f"  {kind:20} {count}")
        return 0

    record = catalog.get(RecordKind(args.kind), args.name)
    if record is None:
        print(f"error: unknown {args.kind} '{args.name}'", file=sys.stderr)
        return 1
    print(json.dumps(record.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
