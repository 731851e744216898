"""
Session Manager - Creates, looks up and expires game sessions.

LIFECYCLE:
1. Client creates a game -> session is fully built, then stored
2. Players reveal their roles -> only `revealed` ever changes
3. TTL passes -> session becomes invisible to lookups, and the periodic
   sweep removes it

PERSISTENCE RULES:
- NO database, sessions are in-memory only
- A process restart drops every session

LOCKING:
- The session map is guarded by one store lock (held only briefly)
- Each session has its own lock; reveals and the sweep both take it
- Lock order is always session lock -> store lock
"""

from __future__ import annotations
import logging
import threading
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator

from ..catalog import WordEntry
from ..constants import DEFAULT_GAME_TTL_MS
from ..errors import SessionNotFound

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return str(uuid.uuid4())


@dataclass
class GameSession:
    """
    One play of the game.

    Everything except `revealed` is fixed at creation. `revealed` only
    grows, and only while the session lock is held.
    """
    category_ids: tuple[str, ...]
    num_players: int
    num_imposters: int
    hints_enabled: bool
    chosen: WordEntry
    imposters: frozenset[int]
    created_at: float
    session_id: str = field(default_factory=new_session_id)
    revealed: set[int] = field(default_factory=set)

    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def is_imposter(self, player_number: int) -> bool:
        return player_number in self.imposters

    def is_revealed(self, player_number: int) -> bool:
        return player_number in self.revealed

    def age(self, now: float) -> float:
        return now - self.created_at

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        return self.age(now) > ttl_seconds

    def sorted_imposters(self) -> list[int]:
        return sorted(self.imposters)


class SessionManager:
    """
    Owns the mapping of session id to GameSession.

    Responsibilities:
    - Store fully-constructed sessions atomically
    - Look sessions up, hiding expired ones
    - Hand out a session with its lock held for mutation
    - Purge sessions older than the TTL

    Usage:
        manager = SessionManager(ttl_seconds=45 * 60)
        manager.add_session(session)

        with manager.locked_session(session_id) as session:
            session.revealed.add(player_number)
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_GAME_TTL_MS / 1000.0,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.RLock()

    def add_session(self, session: GameSession) -> str:
        """Store a fully-built session and return its id."""
        with self._lock:
            if session.session_id in self._sessions:
                raise ValueError(f"Duplicate session id: {session.session_id}")
            self._sessions[session.session_id] = session
        return session.session_id

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a live session by ID, or None if unknown or expired."""
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None or session.is_expired(self.clock(), self.ttl_seconds):
            return None
        return session

    @contextmanager
    def locked_session(self, session_id: str) -> Iterator[GameSession]:
        """
        Yield a live session with its lock held.

        Raises SessionNotFound if the session is unknown, expired, or was
        purged while we were waiting for its lock.
        """
        session = self.get_session(session_id)
        if session is None:
            raise SessionNotFound()

        with session.lock:
            with self._lock:
                still_stored = self._sessions.get(session_id) is session
            if not still_stored or session.is_expired(self.clock(), self.ttl_seconds):
                raise SessionNotFound()
            yield session

    def end_session(self, session_id: str) -> bool:
        """Remove a session now. Returns False if it was not stored."""
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            return False

        with session.lock:
            with self._lock:
                if self._sessions.get(session_id) is not session:
                    return False
                del self._sessions[session_id]
        return True

    def purge_expired(self, now: float | None = None) -> int:
        """
        Remove every session older than the TTL.

        Each candidate's lock is taken before it is deleted, so a purge
        never lands in the middle of a reveal. Returns the number removed.
        """
        if now is None:
            now = self.clock()

        with self._lock:
            candidates = [
                s for s in self._sessions.values()
                if s.is_expired(now, self.ttl_seconds)
            ]

        removed = 0
        for session in candidates:
            with session.lock:
                with self._lock:
                    if self._sessions.get(session.session_id) is session:
                        del self._sessions[session.session_id]
                        removed += 1

        if removed:
            logger.info(f"Purged {removed} expired game(s), {len(self)} remaining")
        return removed

    def list_sessions(self) -> list[str]:
        """List IDs of live sessions."""
        now = self.clock()
        with self._lock:
            return [
                sid for sid, session in self._sessions.items()
                if not session.is_expired(now, self.ttl_seconds)
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions
