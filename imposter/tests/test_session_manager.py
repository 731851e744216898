"""
Tests for the session store.

Tests:
- Add / get / end
- TTL expiry (lazy on lookup, and via purge)
- Locked access for reveals
- Purge and reveal never interleave
"""

import threading

import pytest

from imposter.catalog import WordEntry
from imposter.errors import SessionNotFound
from imposter.session import GameSession, SessionManager

from .conftest import FakeClock, SWEEP_SECONDS, TTL_SECONDS


def make_session(clock: FakeClock, **overrides) -> GameSession:
    values = dict(
        category_ids=("animals",),
        num_players=5,
        num_imposters=1,
        hints_enabled=True,
        chosen=WordEntry("Penguin", "Cold"),
        imposters=frozenset({3}),
        created_at=clock(),
    )
    values.update(overrides)
    return GameSession(**values)


class TestGameSession:
    """Tests for GameSession helpers."""

    def test_ids_are_unique(self, clock):
        ids = {make_session(clock).session_id for _ in range(50)}
        assert len(ids) == 50

    def test_helpers(self, clock):
        session = make_session(clock, imposters=frozenset({4, 2}))

        assert session.is_imposter(2)
        assert not session.is_imposter(1)
        assert session.sorted_imposters() == [2, 4]
        assert not session.is_revealed(1)
        assert session.revealed == set()

    def test_expiry_boundary(self, clock):
        """A session expires only once its age exceeds the TTL."""
        session = make_session(clock)
        assert not session.is_expired(clock() + TTL_SECONDS, TTL_SECONDS)
        assert session.is_expired(clock() + TTL_SECONDS + 0.001, TTL_SECONDS)


class TestSessionManager:
    """Tests for SessionManager."""

    def test_add_and_get(self, session_manager, clock):
        session = make_session(clock)
        session_id = session_manager.add_session(session)

        assert session_id == session.session_id
        assert session_manager.get_session(session_id) is session
        assert session_id in session_manager
        assert len(session_manager) == 1

    def test_get_unknown(self, session_manager):
        assert session_manager.get_session("nonexistent-id") is None

    def test_duplicate_id_rejected(self, session_manager, clock):
        session = make_session(clock)
        session_manager.add_session(session)
        with pytest.raises(ValueError):
            session_manager.add_session(session)

    def test_end_session(self, session_manager, clock):
        session_id = session_manager.add_session(make_session(clock))

        assert session_manager.end_session(session_id)
        assert session_manager.get_session(session_id) is None
        assert not session_manager.end_session(session_id)

    def test_list_sessions_hides_expired(self, session_manager, clock):
        old_id = session_manager.add_session(make_session(clock))
        clock.advance(TTL_SECONDS / 2)
        new_id = session_manager.add_session(make_session(clock))
        clock.advance(TTL_SECONDS / 2 + 1)

        assert session_manager.list_sessions() == [new_id]
        assert old_id in session_manager  # still stored until purged


class TestExpiry:
    """TTL expiry."""

    def test_retrievable_just_before_ttl(self, session_manager, clock):
        session_id = session_manager.add_session(make_session(clock))
        clock.advance(TTL_SECONDS - 0.5)
        session_manager.purge_expired()

        assert session_manager.get_session(session_id) is not None

    def test_absent_after_ttl_and_sweep(self, session_manager, clock):
        session_id = session_manager.add_session(make_session(clock))
        clock.advance(TTL_SECONDS + SWEEP_SECONDS + 0.5)
        session_manager.purge_expired()

        assert session_manager.get_session(session_id) is None
        assert session_id not in session_manager

    def test_lookup_hides_expired_before_sweep(self, session_manager, clock):
        session_id = session_manager.add_session(make_session(clock))
        clock.advance(TTL_SECONDS + 1)

        assert session_manager.get_session(session_id) is None

    def test_purge_counts_only_expired(self, session_manager, clock):
        for _ in range(3):
            session_manager.add_session(make_session(clock))
        clock.advance(TTL_SECONDS + 1)
        fresh_id = session_manager.add_session(make_session(clock))

        assert session_manager.purge_expired() == 3
        assert session_manager.list_sessions() == [fresh_id]

    def test_purge_with_explicit_now(self, session_manager, clock):
        session_manager.add_session(make_session(clock))
        assert session_manager.purge_expired(now=clock() + 10) == 0
        assert session_manager.purge_expired(now=clock() + TTL_SECONDS + 10) == 1


class TestLockedSession:
    """Locked access used by the reveal path."""

    def test_yields_live_session(self, session_manager, clock):
        session = make_session(clock)
        session_manager.add_session(session)

        with session_manager.locked_session(session.session_id) as locked:
            assert locked is session
            assert session.lock.locked()
        assert not session.lock.locked()

    def test_unknown_raises(self, session_manager):
        with pytest.raises(SessionNotFound):
            with session_manager.locked_session("nope"):
                pass

    def test_expired_raises(self, session_manager, clock):
        session_id = session_manager.add_session(make_session(clock))
        clock.advance(TTL_SECONDS + 1)

        with pytest.raises(SessionNotFound):
            with session_manager.locked_session(session_id):
                pass

    def test_lock_released_on_error(self, session_manager, clock):
        session = make_session(clock)
        session_manager.add_session(session)

        with pytest.raises(RuntimeError):
            with session_manager.locked_session(session.session_id):
                raise RuntimeError("boom")
        assert not session.lock.locked()

    def test_purge_waits_for_in_flight_reveal(self, session_manager, clock):
        """A purge blocks on the session lock and removes it only afterwards."""
        session = make_session(clock)
        session_manager.add_session(session)

        inside = threading.Event()
        release = threading.Event()
        purged: list[int] = []

        def reveal():
            with session_manager.locked_session(session.session_id) as s:
                inside.set()
                release.wait(timeout=5)
                s.revealed.add(1)

        worker = threading.Thread(target=reveal)
        worker.start()
        assert inside.wait(timeout=5)

        clock.advance(TTL_SECONDS + 1)
        purger = threading.Thread(target=lambda: purged.append(session_manager.purge_expired()))
        purger.start()
        purger.join(timeout=0.2)

        # Purge is parked on the session lock; the session is still stored
        assert purger.is_alive()
        assert session.session_id in session_manager

        release.set()
        worker.join(timeout=5)
        purger.join(timeout=5)

        assert session.revealed == {1}
        assert purged == [1]
        assert session.session_id not in session_manager

    def test_reveal_after_purge_sees_not_found(self, session_manager, clock):
        """A reveal that was waiting on the lock sees the session is gone."""
        session = make_session(clock)
        session_manager.add_session(session)

        # Hold the lock as if a purge were mid-way through deleting
        session.lock.acquire()
        errors: list[Exception] = []

        def reveal():
            try:
                with session_manager.locked_session(session.session_id):
                    pass
            except SessionNotFound as exc:
                errors.append(exc)

        worker = threading.Thread(target=reveal)
        worker.start()
        worker.join(timeout=0.2)

        with session_manager._lock:
            del session_manager._sessions[session.session_id]
        session.lock.release()
        worker.join(timeout=5)

        assert len(errors) == 1
