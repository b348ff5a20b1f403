"""
BestPath Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Planner configuration loaded from environment variables."""

    # Cost reported by deep water, lava and walls. Never used as an edge weight
    # since impassable cells get no edges.
    IMPASSABLE_COST: int = int(os.getenv("BESTPATH_IMPASSABLE_COST", "100000"))

    # Default for callers that pass discover=None
    DISCOVER: bool = _env_flag("BESTPATH_DISCOVER")

    # Logging
    VERBOSE: bool = _env_flag("BESTPATH_VERBOSE")
    DEBUG_PLANNER: bool = _env_flag("DEBUG_PLANNER")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        if cls.IMPASSABLE_COST <= 0:
            raise ValueError(
                "BESTPATH_IMPASSABLE_COST must be a positive integer "
                f"(got {cls.IMPASSABLE_COST})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "BestPath Configuration:",
            f"  Impassable cost: {cls.IMPASSABLE_COST}",
            f"  Discover by default: {cls.DISCOVER}",
            f"  Verbose: {cls.VERBOSE}",
            f"  Debug planner: {cls.DEBUG_PLANNER}",
            f"  Log level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
