"""
View Models

Render-ready, JSON-serializable snapshots of a game session.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class TileView:
    """Tile as a renderer sees it."""
    id: int
    word: str
    selected: bool
    group_id: int
    css_class: str  # e.g. "tile selected" or "tile group-2"
    interactive: bool


@dataclass
class SolvedGroupView:
    """A solved group with the label it was given in solve order."""
    label: int
    words: List[str]


@dataclass
class GameView:
    """Client-facing game state representation."""
    game_id: str
    date: str
    message: str
    status: str  # "PLAYING", "WON" or "LOST"
    game_over: bool
    won: bool
    mistakes_left: int
    mistake_budget: int
    mistake_indicators: List[int]  # one entry per remaining mistake dot
    tiles: List[TileView]
    solved_groups: List[SolvedGroupView]
    groups_remaining: int
    selected_count: int
    version: int = 0  # per-session action counter; clients drop updates older than the last seen
