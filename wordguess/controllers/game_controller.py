"""
Game Controller

Handles the browser game flow: start form, board, guesses, hints,
result page and leaderboard.
"""

from flask import Blueprint, request, render_template, redirect, url_for, make_response, g

from ..config.game_settings import MSG_MISSING_FIELDS
from ..models.score import ScoreRecord
from ..services.game_service import get_game_engine, MissingInputError
from ..services.leaderboard_service import get_leaderboard, LeaderboardError
from ..utils.decorators import require_round
from ..utils.helpers import store_round
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _render_start_form(error=None):
    engine = get_game_engine()
    return render_template(
        'index.html',
        error=error,
        difficulties=engine.catalog.difficulties,
        default_difficulty=engine.catalog.default_difficulty,
    )


def _hangman_stage(state):
    """Number of drawn hangman parts, clamped to the drawable range."""
    max_attempts = get_game_engine().max_attempts
    return max(0, min(max_attempts, max_attempts - state.attempts_remaining))


def _redirect_after_move(state):
    target = 'game.end' if state.finished else 'game.board'
    return store_round(redirect(url_for(target), code=303), state)


def _log_round_end(state):
    if state.finished:
        game_logger.log_game_event(
            'round_won' if state.won else 'round_lost', state.player, request.remote_addr,
            difficulty=state.difficulty, word=state.secret,
            attempts_left=state.attempts_remaining, tried_letters=state.tried_letters
        )


@game_bp.route('/', methods=['GET'])
def index():
    """Show the start form."""
    return _render_start_form()


@game_bp.route('/', methods=['POST'])
def start():
    """Start a new round and store it in the cookie."""
    player = request.form.get('username', '')
    difficulty = request.form.get('difficulty', '')

    game_logger.log_user_action(request, 'new_round', player.strip() or None, difficulty=difficulty)

    try:
        state = get_game_engine().new_round(player, difficulty)
    except MissingInputError as e:
        game_logger.log_server_response(
            request, 'new_round', False, {'error': str(e)}, validation_error=str(e)
        )
        return _render_start_form(MSG_MISSING_FIELDS)

    game_logger.log_game_event(
        'round_started', state.player, request.remote_addr,
        difficulty=state.difficulty, word_length=len(state.secret)
    )
    return store_round(redirect(url_for('game.board'), code=303), state)


@game_bp.route('/game', methods=['GET'])
@require_round(finished=False)
def board():
    """Show the board of the round in progress."""
    state = g.game_state
    return render_template('game.html', game=state, stage=_hangman_stage(state))


@game_bp.route('/play', methods=['GET'])
def play_redirect():
    return redirect(url_for('game.board'), code=303)


@game_bp.route('/play', methods=['POST'])
@require_round(finished=False)
def play():
    """Apply a letter or word guess."""
    state = g.game_state
    guess = request.form.get('guess', '')

    game_logger.log_user_action(request, 'submit_guess', state.player, guess=guess)

    state = get_game_engine().apply_guess(state, guess)

    game_logger.log_server_response(
        request, 'submit_guess', True, {'state': state.to_dict()}, state.player,
        message=state.message, attempts_left=state.attempts_remaining
    )
    _log_round_end(state)

    return _redirect_after_move(state)


@game_bp.route('/hint', methods=['GET'])
def hint_redirect():
    return redirect(url_for('game.board'), code=303)


@game_bp.route('/hint', methods=['POST'])
@require_round(finished=False, redirect_endpoint='game.board')
def hint():
    """Spend one attempt to reveal a letter."""
    state = g.game_state

    game_logger.log_user_action(request, 'use_hint', state.player)

    state = get_game_engine().apply_hint(state)

    game_logger.log_game_event(
        'hint_used', state.player, request.remote_addr,
        message=state.message, attempts_left=state.attempts_remaining
    )
    _log_round_end(state)

    return _redirect_after_move(state)


@game_bp.route('/end', methods=['GET'])
@require_round(finished=True)
def end():
    """Show the result of a finished round."""
    state = g.game_state
    return render_template('end.html', game=state, stage=_hangman_stage(state))


@game_bp.route('/scores', methods=['GET'])
def scores():
    """Show the leaderboard."""
    try:
        records = get_leaderboard().load_all()
    except LeaderboardError as e:
        game_logger.log_error(request, e, 'read_scores')
        return make_response("Could not read the scores.", 500)

    return render_template('scores.html', scores=records)


@game_bp.route('/save-score', methods=['GET'])
def save_score_redirect():
    return redirect(url_for('game.index'), code=303)


@game_bp.route('/save-score', methods=['POST'])
@require_round(finished=True)
def save_score():
    """Append the finished round to the leaderboard."""
    state = g.game_state
    record = ScoreRecord.from_state(state)

    game_logger.log_user_action(request, 'save_score', state.player, won=state.won)

    try:
        get_leaderboard().append(record)
    except LeaderboardError as e:
        game_logger.log_error(request, e, 'save_score', state.player)
        return make_response("Could not save the score.", 500)

    game_logger.log_game_event(
        'score_saved', state.player, request.remote_addr,
        difficulty=record.difficulty, word=record.word,
        won=record.won, attempts_left=record.attempts_left
    )
    return redirect(url_for('game.scores'), code=303)
