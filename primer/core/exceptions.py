"""
Primer Custom Exceptions

Custom exception classes for error handling throughout Python Primer.
"""


class PrimerError(Exception):
    """Base exception for all Primer errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(PrimerError):
    """Raised when there's an issue with configuration."""
    pass


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration is missing."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""
    pass


# =============================================================================
# DEMO ERRORS
# =============================================================================

class DemoError(PrimerError):
    """Base exception for demo registry errors."""
    pass


class DemoNotFoundError(DemoError):
    """Raised when a demo name is not registered."""

    def __init__(self, name: str, available: list = None):
        message = f"Demo not found: '{name}'"
        details = {"name": name}
        if available:
            details["available"] = available
        super().__init__(message, details)


class DuplicateDemoError(DemoError):
    """Raised when two demos are registered under the same name."""

    def __init__(self, name: str):
        super().__init__(f"Demo already registered: '{name}'", {"name": name})


class DemoExecutionError(DemoError):
    """Raised when a demo fails while running."""

    def __init__(self, name: str, reason: str):
        message = f"Demo '{name}' failed: {reason}"
        super().__init__(message, {"name": name, "reason": reason})


# =============================================================================
# GAME ERRORS
# =============================================================================

class GameError(PrimerError):
    """Base exception for game errors."""
    pass


class InvalidMoveError(GameError):
    """Raised when a move cannot be parsed or applied."""
    pass


class OutOfBoundsError(InvalidMoveError):
    """Raised when a move targets a cell outside the board."""

    def __init__(self, row: int, col: int, size: int = 3):
        message = f"Position ({row}, {col}) is outside the {size}x{size} board"
        super().__init__(message, {"row": row, "col": col})


class CellOccupiedError(InvalidMoveError):
    """Raised when a move targets a cell that already holds a mark."""

    def __init__(self, row: int, col: int, mark: str):
        message = f"Position ({row}, {col}) is already taken by {mark}"
        super().__init__(message, {"row": row, "col": col, "mark": mark})


class GameOverError(GameError):
    """Raised when a move is attempted after the game has finished."""
    pass


class GameAbortedError(GameError):
    """Raised when a player quits or input runs out mid-game."""
    pass


class GameNotFoundError(GameError):
    """Raised when a game session id is unknown."""

    def __init__(self, game_id: str):
        super().__init__(f"Game not found: '{game_id}'", {"game_id": game_id})
