"""
Answer history.

The history log is the single source of truth for how well each question
is known. It is append-only: events are never edited or removed, and every
derived view (mastery, calibration) is recomputed from it on demand.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnswerEvent:
    """One answered turn."""

    question_index: int
    duration: float | None = None  # seconds, None if any wrong attempt

    @property
    def is_success(self) -> bool:
        return self.duration is not None


@dataclass
class HistoryLog:
    """Chronological, append-only sequence of answer events."""

    events: list[AnswerEvent] = field(default_factory=list)

    def append(self, event: AnswerEvent) -> None:
        self.events.append(event)

    def record(self, question_index: int, duration: float | None) -> AnswerEvent:
        """Append an event built from its parts and return it."""
        event = AnswerEvent(question_index=question_index, duration=duration)
        self.append(event)
        return event

    def newest_first(self) -> Iterator[AnswerEvent]:
        return reversed(self.events)

    def first_success(self, question_index: int) -> AnswerEvent | None:
        """Earliest successful event for a question, if any."""
        for event in self.events:
            if event.question_index == question_index and event.is_success:
                return event
        return None

    @property
    def last(self) -> AnswerEvent | None:
        return self.events[-1] if self.events else None

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[AnswerEvent]:
        return iter(self.events)
