"""
Word Guess Game Server - Main Entry Point

This is the main entry point for the word guessing game server.
It builds the Flask application and starts the development server.
"""

import os
import sys

from wordguess import create_app
from wordguess.config import config
from wordguess.services.word_catalog import ConfigurationError
from wordguess.utils.game_logger import game_logger


def main():
    """Main function to build the application and start the server."""
    config_class = config[os.getenv('FLASK_CONFIG', 'default')]

    try:
        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")
    except ConfigurationError as e:
        print(f"✗ Invalid configuration: {e}")
        sys.exit(1)

    game_logger.logger.info("Word Guess Server Starting")

    print(f"\nStarting Word Guess Server on http://{config_class.HOST}:{config_class.PORT}")
    print(f"Debug mode: {config_class.DEBUG}")
    print("=" * 50)

    try:
        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Guess Server shutting down (KeyboardInterrupt)")


if __name__ == '__main__':
    main()
