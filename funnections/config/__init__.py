"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, messages and the puzzle answer key
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    GROUP_COUNT, GROUP_SIZE, MISTAKE_BUDGET, PUZZLE_GROUPS,
    load_puzzle, validate_puzzle_integrity, get_puzzle_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'GROUP_COUNT', 'GROUP_SIZE', 'MISTAKE_BUDGET', 'PUZZLE_GROUPS',
    'load_puzzle', 'validate_puzzle_integrity', 'get_puzzle_statistics'
]
