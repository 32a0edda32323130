"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import ActionResult, GameAction, GameState, GameStatus, Tile
from .view import GameView, SolvedGroupView, TileView

__all__ = [
    'ActionResult', 'GameAction', 'GameState', 'GameStatus', 'Tile',
    'GameView', 'SolvedGroupView', 'TileView'
]
