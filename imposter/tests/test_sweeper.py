"""
Tests for the background session sweeper.
"""

import asyncio
import threading

from imposter.catalog import WordEntry
from imposter.session import GameSession, SessionSweeper

from .conftest import TTL_SECONDS


def add_session(manager, clock) -> str:
    return manager.add_session(GameSession(
        category_ids=("animals",),
        num_players=3,
        num_imposters=1,
        hints_enabled=False,
        chosen=WordEntry("Owl"),
        imposters=frozenset({2}),
        created_at=clock(),
    ))


class TestSessionSweeper:

    def test_start_purges_immediately(self, session_manager, clock):
        stale_id = add_session(session_manager, clock)
        clock.advance(TTL_SECONDS + 1)
        fresh_id = add_session(session_manager, clock)

        async def scenario():
            sweeper = SessionSweeper(session_manager, interval_seconds=60)
            await sweeper.start()
            try:
                assert sweeper.running
            finally:
                await sweeper.stop()

        asyncio.run(scenario())

        assert stale_id not in session_manager
        assert fresh_id in session_manager

    def test_periodic_purge(self, session_manager, clock):
        session_id = add_session(session_manager, clock)

        async def scenario():
            sweeper = SessionSweeper(session_manager, interval_seconds=0.01)
            await sweeper.start()
            assert session_id in session_manager

            clock.advance(TTL_SECONDS + 1)
            for _ in range(100):
                if session_id not in session_manager:
                    break
                await asyncio.sleep(0.01)
            await sweeper.stop()

        asyncio.run(scenario())

        assert session_id not in session_manager

    def test_stop_is_idempotent(self, session_manager):
        async def scenario():
            sweeper = SessionSweeper(session_manager, interval_seconds=60)
            await sweeper.stop()
            await sweeper.start()
            await sweeper.stop()
            await sweeper.stop()
            return sweeper.running

        assert asyncio.run(scenario()) is False

    def test_failed_sweep_keeps_running(self, session_manager, monkeypatch):
        calls = []

        def flaky_purge(now=None):
            calls.append(now)
            if len(calls) == 2:
                raise RuntimeError("sweep failed")
            return 0

        monkeypatch.setattr(session_manager, "purge_expired", flaky_purge)

        async def scenario():
            sweeper = SessionSweeper(session_manager, interval_seconds=0.01)
            await sweeper.start()
            for _ in range(100):
                if len(calls) >= 4:
                    break
                await asyncio.sleep(0.01)
            running = sweeper.running
            await sweeper.stop()
            return running

        assert asyncio.run(scenario()) is True
        assert len(calls) >= 4

    def test_purge_runs_off_the_event_loop_thread(self, session_manager, monkeypatch):
        """Purges run in a worker thread, never on the loop thread."""
        purge_threads = []

        def recording_purge(now=None):
            purge_threads.append(threading.get_ident())
            return 0

        monkeypatch.setattr(session_manager, "purge_expired", recording_purge)

        async def scenario():
            loop_thread = threading.get_ident()
            sweeper = SessionSweeper(session_manager, interval_seconds=0.01)
            await sweeper.start()
            for _ in range(100):
                if len(purge_threads) >= 2:
                    break
                await asyncio.sleep(0.01)
            await sweeper.stop()
            return loop_thread

        loop_thread = asyncio.run(scenario())

        assert len(purge_threads) >= 2
        assert loop_thread not in purge_threads

    def test_loop_stays_responsive_while_purge_waits(self, session_manager, clock):
        session_id = add_session(session_manager, clock)
        session = session_manager.get_session(session_id)
        clock.advance(TTL_SECONDS + 1)

        async def scenario():
            sweeper = SessionSweeper(session_manager, interval_seconds=60)
            session.lock.acquire()
            start = asyncio.ensure_future(sweeper.start())
            # The loop keeps running other coroutines while the purge is parked
            await asyncio.sleep(0.05)
            assert not start.done()
            session.lock.release()
            await start
            await sweeper.stop()

        asyncio.run(scenario())

        assert session_id not in session_manager
