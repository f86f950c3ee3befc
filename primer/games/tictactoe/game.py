"""
Tic-tac-toe game state and loop.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional

from primer.core.exceptions import GameOverError
from primer.core.logging_config import get_logger
from .board import Board, Mark, Move
from .players import Player

logger = get_logger("games.tictactoe")


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"


_WIN_STATUS = {Mark.X: GameStatus.X_WON, Mark.O: GameStatus.O_WON}


class TicTacToe:
    """
    One match: a board, a turn flag and the result so far.

    X always moves first. A completed line ends the game at once; a full
    board without a line is a draw.
    """

    def __init__(self):
        self.board = Board()
        self.x_to_move = True
        self.moves_made = 0
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Mark] = None

    @property
    def current_mark(self) -> Mark:
        return Mark.X if self.x_to_move else Mark.O

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    def reset(self) -> None:
        self.board.reset()
        self.x_to_move = True
        self.moves_made = 0
        self.status = GameStatus.IN_PROGRESS
        self.winner = None

    def apply_move(self, move: Move) -> GameStatus:
        """
        Place the current player's mark and advance the turn.

        Raises:
            GameOverError: if the game has already finished
            OutOfBoundsError / CellOccupiedError: if the move is illegal
        """
        if self.is_over:
            raise GameOverError(
                "The game is already over",
                {"status": self.status.value},
            )

        mark = self.current_mark
        self.board.place(move.row, move.col, mark)
        self.moves_made += 1
        self.x_to_move = not self.x_to_move

        if self.board.has_won(mark):
            self.status = _WIN_STATUS[mark]
            self.winner = mark
        elif self.board.is_full():
            self.status = GameStatus.DRAW

        logger.debug(f"{mark.value} -> ({move.row}, {move.col}), status={self.status.value}")
        return self.status

    def play(
        self,
        player_x: Player,
        player_o: Player,
        output: Callable[[str], Any] = print,
    ) -> GameStatus:
        """Run turns until the game ends, printing the board after each move."""
        output(self.board.render())

        while not self.is_over:
            player = player_x if self.x_to_move else player_o
            move = player.choose_move(self.board.copy())
            self.apply_move(move)
            output(self.board.render())

        if self.winner is not None:
            output(f"Player {self.winner.value} Won !!!")
        else:
            output("It's a draw!")

        logger.info(f"Game finished after {self.moves_made} moves: {self.status.value}")
        return self.status

    def to_dict(self) -> Dict[str, Any]:
        return {
            "board": self.board.to_list(),
            "current_mark": self.current_mark.value,
            "moves_made": self.moves_made,
            "status": self.status.value,
            "winner": self.winner.value if self.winner else None,
        }
