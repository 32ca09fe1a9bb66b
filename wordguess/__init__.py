"""
Word Guess Game Server Application Package

A browser word-guessing game. The round travels in a signed cookie; the
leaderboard is a JSON file.
"""

import random

from flask import Flask, render_template, request
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all services initialized

    Raises:
        ConfigurationError: If the word catalog cannot serve rounds
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .services.game_service import GameEngine
    from .services.leaderboard_service import LeaderboardStore
    from .services.state_transport import StateTransport
    from .services.word_catalog import load_word_catalog
    from .utils.game_logger import game_logger

    game_logger.init_app(app)

    # Initialize services; one random generator for the life of the app
    catalog = load_word_catalog(app.config['WORDS_FILE'], app.config['DEFAULT_DIFFICULTY'])
    app.extensions['game_engine'] = GameEngine(catalog, random.Random())
    app.extensions['state_transport'] = StateTransport(
        app.config['SECRET_KEY'], app.config['STATE_COOKIE_MAX_AGE']
    )
    app.extensions['leaderboard'] = LeaderboardStore(app.config['SCORES_FILE'])

    # Initialize extensions
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.api_controller import api_bp

    app.register_blueprint(game_bp)
    app.register_blueprint(api_bp, url_prefix='/api')

    @app.errorhandler(404)
    def not_found(error):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        game_logger.log_error(request, getattr(error, 'original_exception', None) or error, 'internal_error')
        return "Internal server error", 500

    return app
