"""Demo session lifecycle: start, stop, fail, search and stats."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple
from uuid import uuid4

from demoai.shared.core.clock import Clock, SystemClock
from demoai.shared.core.errors import InvalidSessionSet, NoSuchSession, NotRecording, SessionAlreadyActive

from .models import DemoSession, SessionStats, SessionStatus

logger = logging.getLogger(__name__)


class SessionLifecycle:
    """Owns the session set (newest first) and the single recording session.

    Sessions move ``active -> completed | failed`` and are only removed by
    ``reset``.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock = clock or SystemClock()
        self._sessions: List[DemoSession] = []

    @property
    def sessions(self) -> Tuple[DemoSession, ...]:
        return tuple(self._sessions)

    @property
    def active_session(self) -> Optional[DemoSession]:
        return next((s for s in self._sessions if s.is_recording), None)

    def __len__(self) -> int:
        return len(self._sessions)

    def _index_of(self, session_id: str) -> int:
        for index, session in enumerate(self._sessions):
            if session.id == session_id:
                return index
        raise NoSuchSession(session_id)

    def get(self, session_id: str) -> DemoSession:
        return self._sessions[self._index_of(session_id)]

    # --- Transitions ---

    def start_session(self, title: Optional[str] = None) -> DemoSession:
        active = self.active_session
        if active is not None:
            raise SessionAlreadyActive(f"'{active.title}' is still recording")

        session = DemoSession(
            id=uuid4().hex,
            title=title or f"Demo Session {len(self._sessions) + 1}",
            created_at=self.clock.now(),
        )
        self._sessions.insert(0, session)
        logger.info(f"Started demo session {session.id} ('{session.title}')")
        return session

    def _finish(self, session_id: str, status: SessionStatus, reason: Optional[str] = None) -> DemoSession:
        index = self._index_of(session_id)
        session = self._sessions[index]
        if not session.is_recording:
            raise NotRecording(session_id)

        elapsed = (self.clock.now() - session.created_at).total_seconds()
        finished = session.model_copy(
            update={
                "status": status,
                "is_recording": False,
                "duration_seconds": max(0, int(elapsed)),
                "failure_reason": reason,
            }
        )
        self._sessions[index] = finished
        return finished

    def stop_session(self, session_id: str) -> DemoSession:
        session = self._finish(session_id, SessionStatus.COMPLETED)
        logger.info(f"Completed demo session {session.id} after {session.duration_seconds}s")
        return session

    def fail_session(self, session_id: str, reason: str = "") -> DemoSession:
        session = self._finish(session_id, SessionStatus.FAILED, reason or None)
        logger.warning(f"Demo session {session.id} failed: {reason or 'no reason given'}")
        return session

    # --- Queries ---

    def search(self, query: str = "") -> Iterator[DemoSession]:
        """Lazily yield sessions whose title contains ``query`` (case-insensitive)."""
        needle = (query or "").strip().casefold()
        sessions = tuple(self._sessions)
        if not needle:
            return iter(sessions)
        return (s for s in sessions if needle in s.title.casefold())

    def stats(self) -> SessionStats:
        counts = {status: 0 for status in SessionStatus}
        finished_duration = 0
        for session in self._sessions:
            counts[session.status] += 1
            if session.is_finished:
                finished_duration += session.duration_seconds

        return SessionStats(
            total=len(self._sessions),
            active=counts[SessionStatus.ACTIVE],
            completed=counts[SessionStatus.COMPLETED],
            failed=counts[SessionStatus.FAILED],
            total_finished_duration=finished_duration,
        )

    # --- Bulk ---

    def seed(self, sessions: Iterable[DemoSession]) -> None:
        """Replace the session set; order is kept as given (newest first)."""
        seeded = list(sessions)
        if sum(1 for s in seeded if s.is_recording) > 1:
            raise InvalidSessionSet()
        self._sessions = seeded
        logger.debug(f"Seeded {len(seeded)} demo session(s)")

    def reset(self) -> None:
        self._sessions.clear()
        logger.debug("Session set cleared")
