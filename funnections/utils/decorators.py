"""
Endpoint Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import jsonify


def require_game_service(f):
    """
    Decorator that injects the global game service as ``game_service``
    and answers 500 when it has not been initialized.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
