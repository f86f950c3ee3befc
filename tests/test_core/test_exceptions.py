"""
Tests for Exceptions Module

Tests for primer/core/exceptions.py
"""

import pytest

from primer.core.exceptions import (
    PrimerError,
    ConfigurationError,
    InvalidConfigError,
    MissingConfigError,
    DemoError,
    DemoNotFoundError,
    DuplicateDemoError,
    DemoExecutionError,
    GameError,
    InvalidMoveError,
    OutOfBoundsError,
    CellOccupiedError,
    GameOverError,
    GameAbortedError,
    GameNotFoundError,
)


class TestPrimerError:
    """Tests for the base exception."""

    def test_message_only(self):
        error = PrimerError("Something broke")

        assert str(error) == "Something broke"
        assert error.details == {}

    def test_message_with_details(self):
        error = PrimerError("Something broke", {"key": "value"})

        assert error.message == "Something broke"
        assert str(error) == "Something broke | Details: {'key': 'value'}"


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize("error_class, parent", [
        (ConfigurationError, PrimerError),
        (MissingConfigError, ConfigurationError),
        (InvalidConfigError, ConfigurationError),
        (DemoError, PrimerError),
        (DemoNotFoundError, DemoError),
        (DuplicateDemoError, DemoError),
        (DemoExecutionError, DemoError),
        (GameError, PrimerError),
        (InvalidMoveError, GameError),
        (OutOfBoundsError, InvalidMoveError),
        (CellOccupiedError, InvalidMoveError),
        (GameOverError, GameError),
        (GameAbortedError, GameError),
        (GameNotFoundError, GameError),
    ])
    def test_subclass(self, error_class, parent):
        assert issubclass(error_class, parent)


class TestSpecificErrors:
    """Tests for errors that build their own messages."""

    def test_demo_not_found_lists_available(self):
        error = DemoNotFoundError("nope", ["arrays", "lists"])

        assert "nope" in error.message
        assert error.details["available"] == ["arrays", "lists"]

    def test_out_of_bounds(self):
        error = OutOfBoundsError(3, -1)

        assert "(3, -1)" in error.message
        assert "3x3" in error.message
        assert error.details == {"row": 3, "col": -1}

    def test_cell_occupied(self):
        error = CellOccupiedError(1, 1, "X")

        assert "already taken by X" in error.message
        assert error.details["mark"] == "X"

    def test_game_not_found(self):
        error = GameNotFoundError("abc")

        assert error.details == {"game_id": "abc"}
