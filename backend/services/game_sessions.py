"""
In-memory registry of live games served over HTTP.

Nothing is persisted: sessions disappear with the process. The browser owns
the tick clock, so every engine here runs with a NullScheduler.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from game_engine import GameEngine, NullScheduler
from players.controls import ButtonControls, KeyboardControls, SwipeControls

logger = logging.getLogger(__name__)


class GameSession:
    """One engine plus the input adapters bound to it."""

    def __init__(self, game_id: str, engine: GameEngine):
        self.game_id = game_id
        self.engine = engine
        self.keyboard = KeyboardControls(engine)
        self.buttons = ButtonControls(engine)
        self.swipes = SwipeControls(engine)
        self.lock = threading.Lock()


class GameSessionStore:
    """
    Thread-safe map of game_id -> GameSession.

    Flask may serve requests on several threads; each session has its own
    lock so engine calls for one game are serialized.
    """

    def __init__(self, max_sessions: int = 100):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def create(self, game_id: Optional[str] = None) -> GameSession:
        game_id = game_id or str(uuid.uuid4())
        session = GameSession(game_id, GameEngine(scheduler=NullScheduler()))

        with self._lock:
            if game_id in self._sessions:
                raise ValueError(f"Game with id {game_id} already exists.")
            self._sessions[game_id] = session
            while len(self._sessions) > self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.info("Evicted oldest game session %s", evicted_id)

        logger.info("Created game session %s", game_id)
        return session

    def get(self, game_id: str) -> GameSession:
        with self._lock:
            try:
                return self._sessions[game_id]
            except KeyError:
                raise KeyError(f"Game '{game_id}' not found") from None

    @contextmanager
    def locked(self, game_id: str) -> Iterator[GameSession]:
        """Yield the session while holding its lock."""
        session = self.get(game_id)
        with session.lock:
            yield session

    def delete(self, game_id: str) -> None:
        with self._lock:
            if self._sessions.pop(game_id, None) is None:
                raise KeyError(f"Game '{game_id}' not found")
        logger.info("Deleted game session %s", game_id)

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def summaries(self) -> List[Dict[str, object]]:
        with self._lock:
            sessions = list(self._sessions.values())
        summaries = []
        for session in sessions:
            with session.lock:
                state = session.engine.get_current_state()
            summaries.append({
                "game_id": session.game_id,
                "score": state.score,
                "level": state.level,
                "is_over": state.is_over,
            })
        return summaries
