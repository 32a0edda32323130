"""
Action Decoding

Turns inbound requests (an action name plus an optional tile id) into
GameAction objects and routes them to the engine.
"""

import random
from typing import Any, Mapping, Optional

from ..models.game import GameAction, GameState
from ..core import game_engine
from ..core.game_engine import EngineResult

SELECT_TILE = "select-tile"
SUBMIT = "submit"
SHUFFLE = "shuffle"
DESELECT_ALL = "deselect-all"

ACTIONS = (SELECT_TILE, SUBMIT, SHUFFLE, DESELECT_ALL)


def normalize_action_name(name: Optional[str]) -> str:
    """Lowercases and accepts underscores, so 'deselect_all' == 'deselect-all'."""
    return (name or "").strip().lower().replace("_", "-")


def decode_action(name: Optional[str], payload: Optional[Mapping[str, Any]] = None) -> GameAction:
    """
    Decodes an action request.

    A missing or non-numeric tile id decodes to 0, which matches no tile.

    Raises:
        ValueError: If the action name is not one of ACTIONS
    """
    action_name = normalize_action_name(name)
    if action_name not in ACTIONS:
        raise ValueError(f"Unknown action: {name}")

    tile_id = 0
    if action_name == SELECT_TILE and payload:
        tile_id = _parse_tile_id(payload.get("id"))

    return GameAction(name=action_name, tile_id=tile_id)


def _parse_tile_id(raw: Any) -> int:
    if isinstance(raw, bool):
        return 0
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return 0


def dispatch_action(state: GameState, action: GameAction,
                    rng: Optional[random.Random] = None) -> EngineResult:
    """Calls the engine operation matching ``action``."""
    if action.name == SELECT_TILE:
        return game_engine.toggle_tile(state, action.tile_id)
    if action.name == SUBMIT:
        return game_engine.submit(state)
    if action.name == SHUFFLE:
        return game_engine.shuffle(state, rng)
    if action.name == DESELECT_ALL:
        return game_engine.deselect_all(state)
    raise ValueError(f"Unknown action: {action.name}")
