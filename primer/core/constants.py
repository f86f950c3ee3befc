"""
Primer Constants

Global constants used throughout Python Primer.
"""

from enum import Enum

# =============================================================================
# VERSION INFO
# =============================================================================
VERSION = "1.0.0"
PROJECT_NAME = "Python Primer"

# =============================================================================
# DEMO CATALOGUE
# =============================================================================

class DemoCategory(Enum):
    """Sections of the demo catalogue."""
    BASICS = "basics"
    CONTAINERS = "containers"
    FUNCTIONAL = "functional"
    OOP = "oop"
    CONCURRENCY = "concurrency"
    TIMEKEEPING = "timekeeping"

DEMO_CATEGORY_NAMES = {
    DemoCategory.BASICS: "Basics",
    DemoCategory.CONTAINERS: "Collections & Text",
    DemoCategory.FUNCTIONAL: "Functions, Delegates & Queries",
    DemoCategory.OOP: "Object-Oriented Programming",
    DemoCategory.CONCURRENCY: "Threads & Async",
    DemoCategory.TIMEKEEPING: "Dates & Durations",
}

# Banner printed between demos when running the whole catalogue
BANNER_WIDTH = 60

# =============================================================================
# TIC-TAC-TOE
# =============================================================================

BOARD_SIZE = 3

# Every line that wins: 3 rows, 3 columns, 2 diagonals
WIN_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_CONFIG_PATH = "config/primer_config.json"
DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8000
DEFAULT_DEMO_RUN_LIMIT = "30/minute"
DEFAULT_GAME_CREATE_LIMIT = "60/minute"
DEFAULT_MAX_GAMES = 100
