"""
gridpath Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration loaded from environment variables."""

    # Board dimensions (the original board is 50 x 50 tiles)
    GRID_WIDTH: int = int(os.getenv("GRIDPATH_WIDTH", "50"))
    GRID_HEIGHT: int = int(os.getenv("GRIDPATH_HEIGHT", "50"))

    # Representation used when a query does not name one ("map" or "linked_list")
    DEFAULT_REPRESENTATION: str = os.getenv("GRIDPATH_REPRESENTATION", "map")

    # Logging
    VERBOSE: bool = _env_flag("GRIDPATH_VERBOSE")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.GRID_WIDTH < 1 or cls.GRID_HEIGHT < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {cls.GRID_WIDTH}x{cls.GRID_HEIGHT}. "
                "Set GRIDPATH_WIDTH and GRIDPATH_HEIGHT to values of at least 1."
            )

        if cls.DEFAULT_REPRESENTATION not in ("map", "linked_list"):
            raise ValueError(
                f"Unknown representation '{cls.DEFAULT_REPRESENTATION}'. "
                "GRIDPATH_REPRESENTATION must be 'map' or 'linked_list'."
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "gridpath Configuration:",
            f"  Grid: {cls.GRID_WIDTH}x{cls.GRID_HEIGHT}",
            f"  Default Representation: {cls.DEFAULT_REPRESENTATION}",
            f"  Verbose: {cls.VERBOSE}",
        ]
        return "\n".join(lines)
