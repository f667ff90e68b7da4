"""Command-line interface for routedb."""

import sys
import argparse


def _add_common_arguments(parser):
    parser.add_argument(
        "--archive",
        help="Route archive (ZIP of GPX tracks). Default: from config"
    )
    parser.add_argument(
        "--config",
        help="Path to config.ini file (default: use built-in settings)"
    )


def build_parser():
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="routedb",
        description="Query and encode a database of GPX transport routes"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Info subcommand
    info_parser = subparsers.add_parser(
        "info",
        help="Show route count, bounds and a summary of each route"
    )
    _add_common_arguments(info_parser)

    # Nearest subcommand
    nearest_parser = subparsers.add_parser(
        "nearest",
        help="Find the stop nearest to a coordinate"
    )
    _add_common_arguments(nearest_parser)
    nearest_parser.add_argument(
        "--lat",
        type=float,
        required=True,
        help="Query latitude in degrees"
    )
    nearest_parser.add_argument(
        "--lon",
        type=float,
        required=True,
        help="Query longitude in degrees"
    )

    # Encode subcommand
    encode_parser = subparsers.add_parser(
        "encode",
        help="Write the binary record of one route"
    )
    _add_common_arguments(encode_parser)
    encode_parser.add_argument(
        "--index",
        type=int,
        required=True,
        help="Route index"
    )
    encode_parser.add_argument(
        "--format",
        choices=["route", "points"],
        default="route",
        help="route (FlatBuffers table) or points (int64 little-endian pairs)"
    )
    encode_parser.add_argument(
        "--output",
        required=True,
        help="Output file"
    )

    # Export subcommand
    export_parser = subparsers.add_parser(
        "export",
        help="Export routes to GPX or CSV"
    )
    _add_common_arguments(export_parser)
    export_parser.add_argument(
        "--format",
        choices=["gpx", "csv"],
        default="gpx",
        help="Export format (default: gpx)"
    )
    export_parser.add_argument(
        "--index",
        type=int,
        help="Only export this route (csv: its points)"
    )
    export_parser.add_argument(
        "--output",
        help="Output file, or directory when exporting all routes to GPX "
             "(default: from config)"
    )

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Route to appropriate subcommand
    if args.command == "info":
        from .query import run_info
        run_info(args)
    elif args.command == "nearest":
        from .query import run_nearest
        run_nearest(args)
    elif args.command == "encode":
        from .encode import run_encode
        run_encode(args)
    elif args.command == "export":
        from .export import run_export
        run_export(args)


if __name__ == "__main__":
    main()
