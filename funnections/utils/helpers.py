"""
Helper Functions

Contains utility functions used throughout the application.
"""

from datetime import date
from typing import Dict


def get_user_identity(request_obj) -> Dict[str, str]:
    """Extract user identity information from request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # set for WebSocket requests
    }


def format_puzzle_date(day: date) -> str:
    """Puzzle date label, e.g. 'March 7, 2025'."""
    return f"{day:%B} {day.day}, {day.year}"
