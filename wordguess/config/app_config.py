"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 8080))

    # Word catalog and leaderboard files
    WORDS_FILE = os.getenv('WORDS_FILE', 'words/words.txt')
    SCORES_FILE = os.getenv('SCORES_FILE', 'scores/scores.json')
    DEFAULT_DIFFICULTY = os.getenv('DEFAULT_DIFFICULTY', 'easy')

    # Round state cookie
    STATE_COOKIE_NAME = os.getenv('STATE_COOKIE_NAME', 'game')
    STATE_COOKIE_MAX_AGE = int(os.getenv('STATE_COOKIE_MAX_AGE', 24 * 60 * 60))
    STATE_COOKIE_SECURE = os.getenv('STATE_COOKIE_SECURE', 'False').lower() == 'true'

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    STATE_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
