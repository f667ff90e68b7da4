"""Export subcommand implementation."""

import sys
from pathlib import Path

from ..errors import OutOfRangeError
from ..exporters import GpxExporter, TableExporter
from .common import load_config, load_database


def run_export(args):
    """
    Run the route export to GPX or CSV.

    Args:
        args: Parsed command-line arguments
    """
    print("=" * 60)
    print("Route Exporter")
    print("=" * 60)
    print(f"\nFormat: {args.format}")

    config = load_config(args)
    db = load_database(args, config)

    try:
        if args.format == "gpx":
            exporter = GpxExporter(db, config=config)
            if args.index is None:
                exporter.export_all(args.output)
            else:
                output = args.output or str(
                    Path(config.get_output_dir()) / f"route-{args.index}.gpx"
                )
                exporter.export_route(args.index, output)
        else:
            exporter = TableExporter(db)
            if args.index is None:
                frame = exporter.routes_frame()
                default_name = "routes.csv"
            else:
                frame = exporter.points_frame(args.index)
                default_name = f"route-{args.index}-points.csv"
            output = args.output or str(Path(config.get_output_dir()) / default_name)
            exporter.save_csv(frame, output)

        print("\n" + "=" * 60)
        print("✅ EXPORT COMPLETE!")
        print("=" * 60)

    except OutOfRangeError as e:
        print(f"\n❌ Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\n⚠ Export interrupted by user")
        sys.exit(130)
