"""Command line entry point: patch a location database on disk."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from openextracts.config import ConfigError, get_settings, load_mod_config
from openextracts.mod import OpenExtracts
from openextracts.repository import JsonLocationDatabase, LocationStoreError
from openextracts.utils import ConsoleLogger, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openextracts", description="Adjust location extracts according to a config file"
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json")
    parser.add_argument(
        "--database", type=Path, default=None, help="Folder of <location>/base.json files"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Apply the rules in memory without writing the database back",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log every change (overrides general.debug)"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    try:
        config = load_mod_config(args.config or settings.config_path)
    except ConfigError as exc:
        print(f"openextracts: {exc}", file=sys.stderr)
        return 2

    if args.debug:
        general = config.general.model_copy(update={"debug": True})
        config = config.model_copy(update={"general": general})

    configure_logging(logging.DEBUG if config.general.debug else settings.log_level)
    sink = ConsoleLogger(color=settings.color and not args.no_color)
    database = JsonLocationDatabase(args.database or settings.database_dir)

    try:
        summary = OpenExtracts().post_db_load(database, config, sink)
    except (FileNotFoundError, LocationStoreError) as exc:
        print(f"openextracts: {exc}", file=sys.stderr)
        return 2
    if summary is None:
        return 0

    if not args.dry_run:
        database.save()

    print(
        f"{summary.changed_extracts} of {summary.extracts_processed} extracts changed "
        f"across {summary.locations_processed} locations"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
