"""
API Controller

Handles the read-only JSON endpoints: health, current round, leaderboard.
"""

from flask import Blueprint, request, jsonify

from ..services.game_service import get_game_engine
from ..services.leaderboard_service import get_leaderboard, LeaderboardError
from ..utils.helpers import load_round
from ..utils.game_logger import game_logger

api_bp = Blueprint('api', __name__)


@api_bp.route('/state', methods=['GET'])
def get_state():
    """Get the round carried by the cookie."""
    state = load_round()
    if state is None:
        error_response = {
            'success': False,
            'error': 'No active round'
        }
        game_logger.log_server_response(request, 'get_state', False, error_response)
        return jsonify(error_response), 404

    state_data = state.to_dict()
    if not state.finished:
        state_data.pop('secret')
    state_data['display_word'] = state.display_word

    response_data = {
        'success': True,
        'state': state_data
    }
    game_logger.log_server_response(
        request, 'get_state', True, response_data, state.player,
        finished=state.finished
    )
    return jsonify(response_data)


@api_bp.route('/scores', methods=['GET'])
def get_scores():
    """Get the leaderboard as a JSON list."""
    try:
        records = get_leaderboard().load_all()
    except LeaderboardError as e:
        game_logger.log_error(request, e, 'get_scores')
        error_response = {
            'success': False,
            'error': 'Could not read the scores'
        }
        game_logger.log_server_response(request, 'get_scores', False, error_response)
        return jsonify(error_response), 500

    return jsonify([record.to_dict() for record in records])


@api_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'catalog': get_game_engine().catalog.statistics(),
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
