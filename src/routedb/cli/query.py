"""Info and nearest subcommand implementations."""

import sys

from ..core import haversine_distance
from ..errors import NotFoundError
from .common import load_config, load_database


def run_info(args):
    """
    Print route count, bounds and one line per route.

    Args:
        args: Parsed command-line arguments
    """
    print("=" * 60)
    print("Route Database")
    print("=" * 60)

    config = load_config(args)
    db = load_database(args, config)

    bounds = db.bounds()
    print(f"\nBounds: N={bounds.n} S={bounds.s} E={bounds.e} W={bounds.w}")
    if bounds.is_empty:
        print("⚠ Warning: No points in database")

    print(f"\nRoutes ({db.routes()}):")
    for index, route in enumerate(db):
        label = "-".join(filter(None, [route.country, route.city, route.name]))
        print(f"  {index:4d}  {label or route.metadata_raw or '(unnamed)':30s} "
              f"{len(route.points):6d} points  {route.length_km():8.2f} km")


def run_nearest(args):
    """
    Print the stop nearest to the requested coordinate.

    Args:
        args: Parsed command-line arguments
    """
    print("=" * 60)
    print("Nearest Stop")
    print("=" * 60)
    print(f"\nQuery: {args.lat}, {args.lon}")

    config = load_config(args)
    db = load_database(args, config)

    try:
        stop = db.nearest(args.lat, args.lon)
    except NotFoundError as e:
        print(f"\n❌ Error: {e}")
        sys.exit(1)

    distance = haversine_distance(
        args.lat, args.lon, stop.lat, stop.lon,
        radius=config.get_earth_radius()
    )
    print(f"\n✓ Nearest stop: {stop.lat}, {stop.lon} ({distance:.1f} m)")
