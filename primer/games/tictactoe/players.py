"""
Tic-tac-toe players.

A player looks at a board and returns the Move it wants to make. Human
players read coordinates from an input callable; the computer player wins
when it can and otherwise picks a random empty cell.
"""

import random
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from primer.core.exceptions import GameAbortedError, GameOverError, InvalidMoveError
from primer.core.logging_config import get_logger
from .board import Board, Mark, Move

logger = get_logger("games.tictactoe")


class Player(ABC):
    """Base class for anything that can take a turn."""

    def __init__(self, mark: Mark):
        if mark is Mark.EMPTY:
            raise ValueError("A player must play X or O")
        self.mark = mark

    @abstractmethod
    def choose_move(self, board: Board) -> Move:
        """Return a legal move for the given board."""
        pass


class HumanPlayer(Player):
    """
    Reads ``row col`` (or ``row,col``) from input_fn until a legal move arrives.

    The two coordinates may also be entered on separate lines.
    """

    def __init__(
        self,
        mark: Mark,
        input_fn: Optional[Callable[[], str]] = None,
        output_fn: Optional[Callable[..., None]] = None,
    ):
        super().__init__(mark)
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def _read_line(self) -> str:
        try:
            return self.input_fn()
        except EOFError as e:
            raise GameAbortedError(
                "Input ended before the game finished",
                {"mark": self.mark.value},
            ) from e

    def _read_move(self) -> Move:
        tokens: List[str] = []
        while len(tokens) < 2:
            tokens.extend(self._read_line().replace(",", " ").split())
        return Move.parse(" ".join(tokens))

    def choose_move(self, board: Board) -> Move:
        prompt = f"Enter position for {self.mark.value} : "
        while True:
            self.output_fn(prompt, end="")
            try:
                move = self._read_move()
                if board.get(move.row, move.col) is Mark.EMPTY:
                    return move
                logger.debug(f"Rejected occupied cell ({move.row}, {move.col})")
            except InvalidMoveError as e:
                logger.debug(f"Rejected input: {e.message}")
            prompt = "Enter valid input : "


class ComputerPlayer(Player):
    """One-ply lookahead for a winning cell, otherwise uniform random."""

    def __init__(self, mark: Mark, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        super().__init__(mark)
        self._rng = rng or random.Random(seed)

    def find_winning_move(self, board: Board) -> Optional[Move]:
        for row, col in board.empty_cells():
            trial = board.copy()
            trial.place(row, col, self.mark)
            if trial.has_won(self.mark):
                return Move(row=row, col=col)
        return None

    def choose_move(self, board: Board) -> Move:
        empty = board.empty_cells()
        if not empty:
            raise GameOverError("No empty cells left on the board")

        winning = self.find_winning_move(board)
        if winning is not None:
            logger.debug(f"{self.mark.value} takes winning cell ({winning.row}, {winning.col})")
            return winning

        row, col = self._rng.choice(empty)
        return Move(row=row, col=col)
