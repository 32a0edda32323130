"""
Core Package

The puzzle rules engine. Depends only on models and game settings.
"""

from . import game_engine

__all__ = ['game_engine']
