"""
Session Sweeper - Periodic removal of expired sessions.

Runs as an asyncio task on the server's event loop: one purge at
startup, then one every `interval_seconds`. Each purge runs in a worker
thread, since it waits on session locks held by in-flight reveals.
"""

from __future__ import annotations
import asyncio
import logging

from .manager import SessionManager

logger = logging.getLogger(__name__)


class SessionSweeper:
    """
    Background TTL sweep for a SessionManager.

    Usage:
        sweeper = SessionSweeper(manager, interval_seconds=300)
        await sweeper.start()
        ...
        await sweeper.stop()
    """

    def __init__(self, manager: SessionManager, interval_seconds: float):
        self.manager = manager
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Purge once, then keep purging on the interval."""
        if self.running:
            return
        await asyncio.to_thread(self.manager.purge_expired)
        self._task = asyncio.create_task(self._run())
        logger.info(f"Session sweeper started (every {self.interval_seconds:g}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Session sweeper stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await asyncio.to_thread(self.manager.purge_expired)
            except Exception:
                logger.exception("Session sweep failed")
