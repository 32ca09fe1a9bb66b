import os
import random
import sys
import pytest

# Ensure the project root (containing the `wordguess` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wordguess import create_app
from wordguess.config import TestingConfig
from wordguess.services.game_service import GameEngine
from wordguess.services.state_transport import StateTransport
from wordguess.services.word_catalog import WordCatalog

TEST_SECRET = 'test-secret-key-that-is-long-enough-for-hs256'

WORDS = """\
easy: chat
medium: bonjour
hard:
this line is ignored
"""


@pytest.fixture()
def words_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text(WORDS, encoding='utf-8')
    return path


@pytest.fixture()
def scores_file(tmp_path):
    return tmp_path / 'scores' / 'scores.json'


@pytest.fixture()
def flask_app(tmp_path, words_file, scores_file):
    class TestConfig(TestingConfig):
        SECRET_KEY = TEST_SECRET
        WORDS_FILE = str(words_file)
        SCORES_FILE = str(scores_file)
        DEFAULT_DIFFICULTY = 'easy'
        LOG_DIR = str(tmp_path / 'logs')

    return create_app(TestConfig)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def catalog():
    return WordCatalog({'easy': ['chat'], 'medium': ['bonjour'], 'hard': []}, 'easy')


@pytest.fixture()
def engine(catalog):
    return GameEngine(catalog, random.Random(1234))


@pytest.fixture()
def transport():
    return StateTransport(TEST_SECRET, max_age_seconds=3600)
