import json
import threading
from datetime import datetime, timezone

import pytest

from wordguess.models.game import GameState
from wordguess.models.score import ScoreRecord
from wordguess.services.leaderboard_service import LeaderboardError, LeaderboardStore


def make_record(player='alice', won=True, attempts_left=4):
    return ScoreRecord(
        player=player,
        difficulty='easy',
        word='CHAT',
        won=won,
        attempts_left=attempts_left,
        date=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
    )


def test_missing_file_is_empty(scores_file):
    assert LeaderboardStore(scores_file).load_all() == []


def test_empty_file_is_empty(tmp_path):
    path = tmp_path / 'scores.json'
    path.write_text('', encoding='utf-8')
    assert LeaderboardStore(path).load_all() == []


def test_append_and_load_in_order(scores_file):
    store = LeaderboardStore(scores_file)
    first = make_record('alice')
    second = make_record('bob', won=False, attempts_left=0)

    store.append(first)
    store.append(second)

    assert store.load_all() == [first, second]


def test_file_format(scores_file):
    LeaderboardStore(scores_file).append(make_record())

    data = json.loads(scores_file.read_text(encoding='utf-8'))
    assert data == [{
        'username': 'alice',
        'difficulty': 'easy',
        'word': 'CHAT',
        'won': True,
        'attempts': 4,
        'date': '2024-05-01T12:30:00+00:00',
    }]
    assert list(data[0]) == ['username', 'difficulty', 'word', 'won', 'attempts', 'date']


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / 'scores.json'
    path.write_text('{not json', encoding='utf-8')
    with pytest.raises(LeaderboardError):
        LeaderboardStore(path).load_all()


def test_wrong_shape_raises(tmp_path):
    path = tmp_path / 'scores.json'
    path.write_text('{"username": "alice"}', encoding='utf-8')
    with pytest.raises(LeaderboardError):
        LeaderboardStore(path).load_all()


def test_unwritable_location_raises(tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('a file, not a directory', encoding='utf-8')
    store = LeaderboardStore(blocker / 'scores.json')
    with pytest.raises(LeaderboardError):
        store.append(make_record())


def test_concurrent_appends_are_not_lost(scores_file):
    store = LeaderboardStore(scores_file)
    threads = [
        threading.Thread(target=store.append, args=(make_record(f'player{i}'),))
        for i in range(20)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(record.player for record in store.load_all()) == sorted(f'player{i}' for i in range(20))


def test_record_from_finished_state():
    state = GameState(player='alice', difficulty='medium', secret='BONJOUR', reveal=list('BONJOUR'),
                      attempts_remaining=3, finished=True, won=True)
    record = ScoreRecord.from_state(state)
    assert record.player == 'alice'
    assert record.difficulty == 'medium'
    assert record.word == 'BONJOUR'
    assert record.won
    assert record.attempts_left == 3
    assert record.date.tzinfo is not None


def test_record_from_unfinished_state_is_refused():
    state = GameState(player='alice', difficulty='easy', secret='CHAT', reveal=['_'] * 4,
                      attempts_remaining=6)
    with pytest.raises(ValueError):
        ScoreRecord.from_state(state)
