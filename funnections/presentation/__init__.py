"""
Presentation Package

Bridges game state and clients: view model mapping and action decoding.
No game rules live here.
"""

from .actions import ACTIONS, decode_action, dispatch_action
from .view_model import build_game_view

__all__ = ['ACTIONS', 'decode_action', 'dispatch_action', 'build_game_view']
