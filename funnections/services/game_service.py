"""
Game Service

Manages puzzle sessions and serializes every action on a session.
"""

import random
import threading
import time
import uuid
from datetime import date as date_cls
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..config.game_settings import MISTAKE_BUDGET, PUZZLE_GROUPS
from ..models.game import ActionResult, GameState
from ..models.view import GameView
from ..presentation.actions import decode_action, dispatch_action
from ..presentation.view_model import build_game_view
from ..utils.helpers import format_puzzle_date
from ..core import game_engine

DEFAULT_GAME_ID = "default"


class GameSession:
    """
    One game and the lock that guards it.

    All reads and writes of ``state`` go through ``lock`` so concurrent
    requests never see or produce a half-applied action.
    """

    def __init__(self, game_id: str, state: GameState, rng: random.Random):
        self.game_id = game_id
        self.state = state
        self.rng = rng
        self.lock = threading.Lock()
        self.created_at = time.time()
        self.last_active = self.created_at
        self.version = 0

    def touch(self) -> None:
        self.last_active = time.time()


class GameService:
    """
    Core game service managing puzzle sessions.

    This class handles:
    - Session management with unique game IDs plus one shared default game
    - Per-session locking so each action is an atomic read-modify-write
    - Translating requests into engine calls and engine state into views
    """

    def __init__(self,
                 puzzle_groups: Optional[List[List[str]]] = None,
                 mistake_budget: Optional[int] = None,
                 puzzle_date: Optional[str] = None,
                 rng: Optional[random.Random] = None):
        self.puzzle_groups = [list(group) for group in (puzzle_groups or PUZZLE_GROUPS)]
        self.mistake_budget = MISTAKE_BUDGET if mistake_budget is None else mistake_budget
        self.puzzle_date = puzzle_date
        self.rng = rng or random.Random()
        self.games: Dict[str, GameSession] = {}
        self._games_lock = threading.Lock()

        self.create_new_game(DEFAULT_GAME_ID)

    def create_new_game(self, game_id: Optional[str] = None) -> str:
        """
        Creates a new game session with a freshly shuffled grid.

        Args:
            game_id: Identifier to use, a random UUID when omitted.
                An existing session with the same id is replaced.

        Returns:
            str: Game ID for this session
        """
        game_id = game_id or str(uuid.uuid4())
        # Per-session generator seeded from the service generator
        session_rng = random.Random(self.rng.getrandbits(64))
        label = self.puzzle_date or format_puzzle_date(date_cls.today())

        state = game_engine.initialize(self.puzzle_groups, self.mistake_budget, label, session_rng)

        with self._games_lock:
            self.games[game_id] = GameSession(game_id, state, session_rng)
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        with self._games_lock:
            return self.games.get(game_id)

    def get_game_view(self, game_id: str) -> Optional[GameView]:
        """
        Returns the current view of a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameView or None if game not found
        """
        session = self.get_session(game_id)
        if session is None:
            return None

        with session.lock:
            return build_game_view(session.state, game_id, session.version)

    def is_valid_action(self, game_id: str, action_name: Optional[str]) -> Tuple[bool, str]:
        """
        Validates an action for a specific game session.

        Returns:
            Tuple of (is_valid, error_message)
        """
        session = self.get_session(game_id)
        if session is None:
            return False, "Game not found"

        try:
            decode_action(action_name)
        except ValueError as e:
            return False, str(e)

        with session.lock:
            if session.state.game_over:
                return False, "Game is already over"

        return True, ""

    def perform_action(self,
                       game_id: str,
                       action_name: Optional[str],
                       payload: Optional[Mapping[str, Any]] = None) -> Optional[Tuple[GameView, ActionResult]]:
        """
        Applies one player action and returns the resulting view.

        Args:
            game_id: Unique game identifier
            action_name: One of select-tile, submit, shuffle, deselect-all
            payload: Request data, read for the tile ``id``

        Returns:
            (GameView, ActionResult) or None if the game is not found

        Raises:
            ValueError: If the action name is unknown
        """
        action = decode_action(action_name, payload)

        session = self.get_session(game_id)
        if session is None:
            return None

        with session.lock:
            state, result = dispatch_action(session.state, action, session.rng)
            session.touch()
            session.version += 1
            return build_game_view(state, game_id, session.version), result

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory. The default game cannot be deleted.

        Returns:
            bool: True if game was deleted, False if not found or protected
        """
        if game_id == DEFAULT_GAME_ID:
            return False
        with self._games_lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def cleanup_idle_sessions(self, max_idle_seconds: float, now: Optional[float] = None) -> Dict:
        """
        Drops non-default sessions that have been idle for too long.

        Returns:
            Dictionary with count of removed sessions and their IDs
        """
        now = time.time() if now is None else now
        with self._games_lock:
            expired = [
                game_id for game_id, session in self.games.items()
                if game_id != DEFAULT_GAME_ID and now - session.last_active > max_idle_seconds
            ]
            for game_id in expired:
                del self.games[game_id]

        return {
            "cleaned_count": len(expired),
            "removed_game_ids": expired
        }

    def active_games_count(self) -> int:
        with self._games_lock:
            return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
