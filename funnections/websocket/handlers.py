"""
WebSocket Event Handlers

Real-time game updates: clients join a game room and receive the new state
after every action, whether it arrived over HTTP or over the socket.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.game import ActionResult
from ..services.game_service import DEFAULT_GAME_ID, get_game_service
from ..utils.game_logger import game_logger


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def broadcast_game_state(socketio, game_id: str, state: dict) -> None:
    """Send the new game state to everyone watching the game."""
    if socketio is None:
        return
    socketio.emit('game_state_update', {
        'success': True,
        'state': state
    }, room=game_room(game_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    def handle_join_game(data=None):
        """Join a game room for real-time updates."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = (data or {}).get('game_id') or DEFAULT_GAME_ID
        view = game_service.get_game_view(game_id)
        if view is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)

        emit('game_state_update', {
            'success': True,
            'state': asdict(view)
        })

    @socketio.on('leave_game')
    def handle_leave_game(data=None):
        """Leave a game room."""
        game_id = (data or {}).get('game_id') or DEFAULT_GAME_ID
        leave_room(game_room(game_id))
        game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('game_action')
    def handle_game_action(data=None):
        """Apply select-tile, submit, shuffle or deselect-all sent over the socket."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = data or {}
        game_id = data.get('game_id') or DEFAULT_GAME_ID
        action = data.get('action')

        try:
            game_logger.log_user_action(request, action or 'game_action', game_id, tile_id=data.get('id'))

            is_valid, error = game_service.is_valid_action(game_id, action)
            if not is_valid:
                emit('error', {'error': error})
                return

            outcome = game_service.perform_action(game_id, action, data)
            if outcome is None:
                emit('error', {'error': 'Game not found'})
                return

            view, result = outcome
            if result is ActionResult.GAME_FINISHED:
                emit('error', {'error': 'Game is already over'})
                return

            game_logger.log_action_result(
                game_id, result, request.remote_addr,
                mistakes_left=view.mistakes_left, groups_remaining=view.groups_remaining
            )

            state = asdict(view)
            emit('action_result', {
                'success': True,
                'result': result.value,
                'state': state
            })
            broadcast_game_state(socketio, game_id, state)

        except Exception as e:
            game_logger.log_error(request, e, action or 'game_action', game_id)
            emit('error', {'error': str(e)})
