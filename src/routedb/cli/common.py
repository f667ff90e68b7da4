"""Helpers shared by the CLI subcommands."""

import sys
from pathlib import Path

from ..core import Config
from ..database import Database
from ..errors import RouteDbError


def load_config(args) -> Config:
    """Load the config named on the command line, or the defaults."""
    if not args.config:
        return Config()

    print(f"Config: {args.config}")
    try:
        return Config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"\n❌ Error loading config: {e}")
        sys.exit(1)


def load_database(args, config: Config) -> Database:
    """Load the archive named on the command line (or in the config)."""
    archive = args.archive or config.get_archive_path()
    print(f"Archive: {archive}")

    if not Path(archive).exists():
        print(f"\n❌ Error: Archive not found: {archive}")
        sys.exit(1)

    try:
        db = Database.from_file(archive)
    except RouteDbError as e:
        print(f"\n❌ Error loading archive: {e}")
        sys.exit(1)

    print(f"✓ Loaded {db.routes()} routes")
    return db
