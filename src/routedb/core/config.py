"""Configuration management for routedb."""

import configparser
from pathlib import Path
from typing import Optional

from .utils import EARTH_RADIUS_M


class Config:
    """Parse and manage routedb configuration."""

    # Defaults (used if no config file provided)
    DEFAULT_DATABASE = {
        "archive": "data/routedb.zip",
    }

    DEFAULT_EXPORT = {
        "output_dir": "data/export",
        "gpx_creator": "routedb",
    }

    DEFAULT_SEARCH = {
        "earth_radius_m": float(EARTH_RADIUS_M),
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to config.ini file. If None, uses defaults.
        """
        self.database = self.DEFAULT_DATABASE.copy()
        self.export = self.DEFAULT_EXPORT.copy()
        self.search = self.DEFAULT_SEARCH.copy()

        if config_file:
            self._load_config(config_file)

    def _load_config(self, config_file: str):
        """Load configuration from INI file."""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        parser = configparser.ConfigParser()
        parser.read(config_path)

        if "database" in parser:
            self.database.update(parser["database"])

        if "export" in parser:
            self.export.update(parser["export"])

        if "search" in parser:
            radius = parser["search"].get("earth_radius_m")
            if radius is not None:
                try:
                    self.search["earth_radius_m"] = float(radius)
                except ValueError:
                    raise ValueError(f"Invalid earth_radius_m in {config_file}: {radius}")

    def get_archive_path(self) -> str:
        """Get default route archive path."""
        return self.database.get("archive", self.DEFAULT_DATABASE["archive"])

    def get_output_dir(self) -> str:
        """Get default export directory."""
        return self.export.get("output_dir", self.DEFAULT_EXPORT["output_dir"])

    def get_gpx_creator(self) -> str:
        """Get creator string written into exported GPX files."""
        return self.export.get("gpx_creator", self.DEFAULT_EXPORT["gpx_creator"])

    def get_earth_radius(self) -> float:
        """Get sphere radius (meters) used for distance readouts."""
        return self.search["earth_radius_m"]
