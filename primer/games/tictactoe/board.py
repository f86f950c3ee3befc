"""
Tic-tac-toe board and move models.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from primer.core.constants import BOARD_SIZE, WIN_LINES
from primer.core.exceptions import CellOccupiedError, InvalidMoveError, OutOfBoundsError


class Mark(str, Enum):
    """Contents of a single cell."""
    EMPTY = "_"
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Mark":
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        return Mark.EMPTY


class Move(BaseModel):
    """A zero-based board coordinate."""
    row: int = Field(ge=0, le=BOARD_SIZE - 1)
    col: int = Field(ge=0, le=BOARD_SIZE - 1)

    @classmethod
    def parse(cls, text: str) -> "Move":
        """
        Parse ``"r c"`` or ``"r,c"``.

        Raises:
            InvalidMoveError: if the text is not two integers
            OutOfBoundsError: if either coordinate is off the board
        """
        parts = text.replace(",", " ").split()
        if len(parts) != 2:
            raise InvalidMoveError(f"Expected two coordinates, got {text!r}")
        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError as e:
            raise InvalidMoveError(f"Coordinates must be integers, got {text!r}") from e
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise OutOfBoundsError(row, col, BOARD_SIZE)
        return cls(row=row, col=col)


class Board:
    """3x3 grid of marks."""

    def __init__(self):
        self.size = BOARD_SIZE
        self._cells: List[List[Mark]] = []
        self.reset()

    def reset(self) -> None:
        self._cells = [[Mark.EMPTY] * self.size for _ in range(self.size)]

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfBoundsError(row, col, self.size)

    def get(self, row: int, col: int) -> Mark:
        self._check_bounds(row, col)
        return self._cells[row][col]

    def place(self, row: int, col: int, mark: Mark) -> None:
        """Put a mark on an empty cell."""
        self._check_bounds(row, col)
        if mark is Mark.EMPTY:
            raise InvalidMoveError("Cannot place an empty mark")
        current = self._cells[row][col]
        if current is not Mark.EMPTY:
            raise CellOccupiedError(row, col, current.value)
        self._cells[row][col] = mark

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self._cells[row][col] is Mark.EMPTY
        ]

    def is_full(self) -> bool:
        return not self.empty_cells()

    def has_won(self, mark: Mark) -> bool:
        if mark is Mark.EMPTY:
            return False
        return any(
            all(self._cells[r][c] is mark for r, c in line)
            for line in WIN_LINES
        )

    def winner(self) -> Optional[Mark]:
        """Mark of the first complete line (rows, then columns, then diagonals)."""
        for line in WIN_LINES:
            first = self._cells[line[0][0]][line[0][1]]
            if first is not Mark.EMPTY and all(self._cells[r][c] is first for r, c in line):
                return first
        return None

    def copy(self) -> "Board":
        clone = Board()
        clone._cells = [row[:] for row in self._cells]
        return clone

    def to_list(self) -> List[List[str]]:
        return [[cell.value for cell in row] for row in self._cells]

    def render(self) -> str:
        return "\n".join(" ".join(cell.value for cell in row) for row in self._cells)

    def __str__(self) -> str:
        return self.render()
