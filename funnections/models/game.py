"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class GameStatus(Enum):
    """Lifecycle of a single puzzle session."""
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"


class ActionResult(Enum):
    """Outcome of one engine operation, returned beside the updated state."""
    APPLIED = "APPLIED"
    IGNORED = "IGNORED"
    GAME_FINISHED = "GAME_FINISHED"
    WRONG_SELECTION_SIZE = "WRONG_SELECTION_SIZE"
    CORRECT = "CORRECT"
    INCORRECT = "INCORRECT"
    WON = "WON"
    LOST = "LOST"


@dataclass
class Tile:
    """One word cell in the grid."""
    id: int
    word: str
    selected: bool = False
    group_id: int = 0  # 0 until the tile's group is solved, then its solve label

    @property
    def solved(self) -> bool:
        return self.group_id != 0


@dataclass
class GameState:
    """Live state of one puzzle session."""
    tiles: List[Tile]
    mistakes_left: int
    mistake_budget: int
    remaining_groups: List[List[str]]
    date: str
    message: str = ""
    solved_groups: List[List[str]] = field(default_factory=list)
    next_group_label: int = 0

    @property
    def status(self) -> GameStatus:
        if not self.remaining_groups:
            return GameStatus.WON
        if self.mistakes_left <= 0:
            return GameStatus.LOST
        return GameStatus.PLAYING

    @property
    def game_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def selected_tiles(self) -> List[Tile]:
        return [tile for tile in self.tiles if tile.selected]


@dataclass
class GameAction:
    """An inbound player action decoded from a request."""
    name: str
    tile_id: int = 0
