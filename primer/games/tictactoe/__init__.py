"""Console tic-tac-toe with an optional computer opponent."""

from .board import Board, Mark, Move
from .game import GameStatus, TicTacToe
from .players import ComputerPlayer, HumanPlayer, Player

__all__ = [
    "Board",
    "Mark",
    "Move",
    "GameStatus",
    "TicTacToe",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
]
