"""Export formats for route databases."""

from .gpx import GpxExporter
from .tables import TableExporter

__all__ = ["GpxExporter", "TableExporter"]
