"""
Tests for services/game_sessions.py.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game_engine import NullScheduler  # noqa: E402
from services.game_sessions import GameSessionStore  # noqa: E402


def test_create_and_get():
    store = GameSessionStore()
    session = store.create("game-1")
    assert store.get("game-1") is session
    assert isinstance(session.engine.scheduler, NullScheduler)
    assert session.keyboard.engine is session.engine


def test_duplicate_id_rejected():
    store = GameSessionStore()
    store.create("game-1")
    with pytest.raises(ValueError):
        store.create("game-1")


def test_missing_game_raises_key_error():
    store = GameSessionStore()
    with pytest.raises(KeyError):
        store.get("missing")
    with pytest.raises(KeyError):
        store.delete("missing")
    with pytest.raises(KeyError):
        with store.locked("missing"):
            pass


def test_oldest_session_evicted():
    store = GameSessionStore(max_sessions=2)
    store.create("a")
    store.create("b")
    store.create("c")
    assert store.ids() == ["b", "c"]
    assert len(store) == 2


def test_locked_yields_session():
    store = GameSessionStore()
    store.create("game-1")
    with store.locked("game-1") as session:
        assert session.lock.locked()
    assert not session.lock.locked()


def test_summaries():
    store = GameSessionStore()
    store.create("game-1")
    assert store.summaries() == [
        {"game_id": "game-1", "score": 0, "level": 1, "is_over": False}
    ]


def test_summaries_read_under_session_lock():
    store = GameSessionStore()
    session = store.create("game-1")
    session.lock = MagicMock()

    store.summaries()

    session.lock.__enter__.assert_called_once()
    session.lock.__exit__.assert_called_once()
