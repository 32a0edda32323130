"""
Services Package

Contains the session service. The rules engine lives in funnections.core.game_engine.
"""

from .game_service import DEFAULT_GAME_ID, GameService, get_game_service, initialize_game_service

__all__ = [
    'DEFAULT_GAME_ID', 'GameService', 'get_game_service', 'initialize_game_service'
]
