"""Encode subcommand implementation."""

import sys
from pathlib import Path

from ..errors import EncodingError, OutOfRangeError
from .common import load_config, load_database


def run_encode(args):
    """
    Write the binary record of one route.

    Args:
        args: Parsed command-line arguments
    """
    print("=" * 60)
    print("Route Encoder")
    print("=" * 60)
    print(f"\nRoute index: {args.index}")
    print(f"Format: {args.format}")
    print(f"Output: {args.output}")

    config = load_config(args)
    db = load_database(args, config)

    try:
        if args.format == "points":
            data = db.points(args.index)
        else:
            data = db.route(args.index)
    except (OutOfRangeError, EncodingError) as e:
        print(f"\n❌ Error: {e}")
        sys.exit(1)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)

    print(f"✓ Wrote {len(data)} bytes to {args.output}")
