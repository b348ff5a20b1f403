"""Console output for planner runs.

Planner messages are printed with a short tag and an ANSI colour per kind of
event: deterministic planning stages, discovery requests against the host
world, recoveries, results and debug renders. Set ``BESTPATH_NO_COLOR`` to
keep the tags but drop the escape codes (CI logs, redirected output).
"""

import os
from enum import Enum


class Color(Enum):
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Return ``text`` wrapped in ``color``, or unchanged under ``BESTPATH_NO_COLOR``."""
    if os.getenv("BESTPATH_NO_COLOR"):
        return text
    codes = (Color.BOLD.value if bold else "") + color.value
    return f"{codes}{text}{Color.RESET.value}"


# Tags keep log lines distinguishable without colour
LOG_TAG_DETERMINISTIC = "[•]"
LOG_TAG_DISCOVERY = "[?]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"


def log_deterministic(message: str) -> None:
    """Log a deterministic planning stage (blue)."""
    print(colored(f"{LOG_TAG_DETERMINISTIC} {message}", Color.BLUE))


def log_discovery(message: str) -> None:
    """Log a discovery request (yellow)."""
    print(colored(f"{LOG_TAG_DISCOVERY} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Failure or sentinel recovery (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Planning result summary (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Debug renders and other detail (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))
