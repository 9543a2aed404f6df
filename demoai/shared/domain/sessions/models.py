"""Demo session data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SessionStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


class DemoSession(BaseModel):
    """One recorded demo walkthrough.

    Instances are immutable; ``SessionLifecycle`` replaces them on every
    transition.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    created_at: datetime
    duration_seconds: int = Field(default=0, ge=0)
    status: SessionStatus = SessionStatus.ACTIVE
    is_recording: bool = True
    failure_reason: Optional[str] = None

    @model_validator(mode="after")
    def _recording_matches_status(self) -> "DemoSession":
        if (self.status is SessionStatus.ACTIVE) != self.is_recording:
            raise ValueError("is_recording must be True exactly when status is active")
        return self

    @property
    def is_finished(self) -> bool:
        return self.status is not SessionStatus.ACTIVE

    @property
    def transcript_status(self) -> str:
        """Label shown next to the transcript button."""
        if self.status is SessionStatus.COMPLETED:
            return "Available"
        if self.status is SessionStatus.ACTIVE:
            return "Processing"
        return "Unavailable"

    def formatted_duration(self) -> str:
        minutes, seconds = divmod(self.duration_seconds, 60)
        return f"{minutes}:{seconds:02d}"


class SessionStats(BaseModel):
    """Aggregate counts over the current session set."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    active: int = 0
    completed: int = 0
    failed: int = 0
    total_finished_duration: int = 0

    @property
    def finished(self) -> int:
        return self.completed + self.failed

    @property
    def average_duration_seconds(self) -> float:
        if not self.finished:
            return 0.0
        return self.total_finished_duration / self.finished

    @property
    def completion_rate(self) -> float:
        if not self.finished:
            return 0.0
        return self.completed / self.finished

    def counts(self) -> dict:
        return {
            "total": self.total,
            "active": self.active,
            "completed": self.completed,
            "failed": self.failed,
        }
