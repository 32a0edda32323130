"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, request, jsonify
from ..config.game_settings import get_puzzle_statistics
from ..models.game import ActionResult
from ..services.game_service import DEFAULT_GAME_ID
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..websocket.handlers import broadcast_game_state

game_bp = Blueprint('game', __name__)

_ERROR_STATUS = {
    'Game not found': 404,
    'Game is already over': 409,
}


def _request_payload() -> dict:
    """Action payload from a JSON body or form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _state_response(game_service, game_id: str, action: str):
    try:
        game_logger.log_user_action(request, action, game_id)

        view = game_service.get_game_view(game_id)
        if view is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, action, False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(view)
        }
        game_logger.log_server_response(
            request, action, True, response_data, game_id, status=view.status
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, action, game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, action, False, error_response, game_id)
        return jsonify(error_response), 500


def _action_response(game_service, game_id: str, action: str):
    try:
        payload = _request_payload()

        game_logger.log_user_action(request, action, game_id, tile_id=payload.get('id'))

        is_valid, error = game_service.is_valid_action(game_id, action)
        if not is_valid:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, action, False, error_response, game_id, validation_error=error
            )
            return jsonify(error_response), _ERROR_STATUS.get(error, 400)

        outcome = game_service.perform_action(game_id, action, payload)
        if outcome is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, action, False, error_response, game_id)
            return jsonify(error_response), 404

        view, result = outcome
        state = asdict(view)

        # Finished between validation and the locked action
        if result is ActionResult.GAME_FINISHED:
            error_response = {
                'success': False,
                'error': 'Game is already over',
                'state': state
            }
            game_logger.log_server_response(request, action, False, error_response, game_id)
            return jsonify(error_response), 409

        response_data = {
            'success': True,
            'result': result.value,
            'state': state
        }

        game_logger.log_server_response(
            request, action, True, response_data, game_id, result=result.value
        )
        game_logger.log_action_result(
            game_id, result, request.remote_addr,
            mistakes_left=view.mistakes_left, groups_remaining=view.groups_remaining
        )

        broadcast_game_state(current_app.socketio, game_id, state)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, action, game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, action, False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/state', methods=['GET'])
@require_game_service
def get_default_state(game_service):
    """Get the shared game's current state."""
    return _state_response(game_service, DEFAULT_GAME_ID, 'get_state')


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    return _state_response(game_service, game_id, 'get_state')


@game_bp.route('/<action>', methods=['POST'])
@require_game_service
def default_game_action(action, game_service):
    """Apply select-tile, submit, shuffle or deselect-all to the shared game."""
    return _action_response(game_service, DEFAULT_GAME_ID, action)


@game_bp.route('/game/<game_id>/<action>', methods=['POST'])
@require_game_service
def game_action(game_id, action, game_service):
    """Apply select-tile, submit, shuffle or deselect-all to a game session."""
    return _action_response(game_service, game_id, action)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        view = game_service.get_game_view(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(view)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_created', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session. The shared default game is kept."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), 200 if success else 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_games_count(),
            'puzzle': get_puzzle_statistics(game_service.puzzle_groups),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
