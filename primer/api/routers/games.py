"""Tic-tac-toe router for Python Primer API."""

import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from primer.core.config import get_config
from primer.core.exceptions import (
    CellOccupiedError,
    GameNotFoundError,
    GameOverError,
    OutOfBoundsError,
)
from primer.core.logging_config import get_logger
from primer.games.tictactoe import ComputerPlayer, Mark, Move, TicTacToe
from .demos import limiter

logger = get_logger("api.games")

router = APIRouter()


@dataclass
class GameSession:
    game_id: str
    game: TicTacToe
    computer: Optional[ComputerPlayer] = None
    last_computer_move: Optional[Move] = None


# In-memory session store, oldest first; sessions do not survive a restart
_games: "OrderedDict[str, GameSession]" = OrderedDict()
_games_lock = threading.Lock()


class CreateGameRequest(BaseModel):
    vs_computer: bool = False
    seed: Optional[int] = None


class GameState(BaseModel):
    game_id: str
    board: List[List[str]]
    current_mark: str
    moves_made: int
    status: str
    winner: Optional[str] = None
    vs_computer: bool = False
    computer_move: Optional[Move] = None


def _state(session: GameSession) -> GameState:
    return GameState(
        game_id=session.game_id,
        vs_computer=session.computer is not None,
        computer_move=session.last_computer_move,
        **session.game.to_dict(),
    )


def _get_session(game_id: str) -> GameSession:
    session = _games.get(game_id)
    if session is None:
        raise GameNotFoundError(game_id)
    return session


def _computer_turn(session: GameSession) -> None:
    game = session.game
    computer = session.computer
    session.last_computer_move = None
    if computer is None or game.is_over or game.current_mark is not computer.mark:
        return
    move = computer.choose_move(game.board.copy())
    game.apply_move(move)
    session.last_computer_move = move


def _make_room(max_games: int) -> None:
    """Evict sessions until one more fits. Finished games go first, then the oldest."""
    while len(_games) >= max_games:
        finished = next((gid for gid, s in _games.items() if s.game.is_over), None)
        game_id = finished if finished is not None else next(iter(_games))
        del _games[game_id]
        logger.info(f"Evicted game {game_id} (store holds {max_games} games)")


def _game_create_limit() -> str:
    return get_config().api.game_create_limit


def clear_games() -> None:
    """Drop every stored session."""
    with _games_lock:
        _games.clear()


@router.post("", response_model=GameState, status_code=201)
@limiter.limit(_game_create_limit)
def create_game(request: Request, game_request: Optional[CreateGameRequest] = None):
    """Start a new game. A computer playing X moves immediately."""
    game_request = game_request or CreateGameRequest()
    config = get_config()
    game_config = config.game
    seed = game_request.seed if game_request.seed is not None else game_config.seed

    computer = None
    if game_request.vs_computer:
        computer = ComputerPlayer(Mark(game_config.computer_mark), seed=seed)

    session = GameSession(game_id=uuid.uuid4().hex, game=TicTacToe(), computer=computer)
    with _games_lock:
        _computer_turn(session)
        _make_room(config.api.max_games)
        _games[session.game_id] = session

    logger.info(f"Created game {session.game_id} (vs_computer={game_request.vs_computer})")
    return _state(session)


@router.get("/{game_id}", response_model=GameState)
def get_game(game_id: str):
    with _games_lock:
        try:
            session = _get_session(game_id)
        except GameNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
        return _state(session)


@router.post("/{game_id}/moves", response_model=GameState)
def make_move(game_id: str, move: Move):
    """Play the current mark at (row, col); the computer replies if present."""
    with _games_lock:
        try:
            session = _get_session(game_id)
            session.game.apply_move(move)
            _computer_turn(session)
        except GameNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
        except CellOccupiedError as e:
            raise HTTPException(status_code=400, detail=e.message)
        except OutOfBoundsError as e:
            raise HTTPException(status_code=422, detail=e.message)
        except GameOverError as e:
            raise HTTPException(status_code=409, detail=e.message)
        return _state(session)


@router.delete("/{game_id}", status_code=204)
def delete_game(game_id: str):
    with _games_lock:
        if _games.pop(game_id, None) is None:
            raise HTTPException(status_code=404, detail=f"Game not found: '{game_id}'")
