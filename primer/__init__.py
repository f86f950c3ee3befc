"""
Python Primer - Runnable Walkthroughs of Core Python Features

A catalogue of small console demos (collections, functions, OOP, threads,
async, dates and durations) plus a tic-tac-toe game, runnable from the
command line or over HTTP.

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "Python Primer Team"
__project__ = "Python Primer"

from pathlib import Path

# Load environment variables early - before any other imports that might need them
from primer.core.env_loader import ensure_env_loaded
ensure_env_loaded()

# Package root directory
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent

from .demos import list_demos, run_demo, run_all, capture_demo
from .games.tictactoe import TicTacToe, HumanPlayer, ComputerPlayer

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__project__",
    # Paths
    "PACKAGE_ROOT",
    "PROJECT_ROOT",
    # Demos
    "list_demos",
    "run_demo",
    "run_all",
    "capture_demo",
    # Games
    "TicTacToe",
    "HumanPlayer",
    "ComputerPlayer",
]
