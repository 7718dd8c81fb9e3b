"""
Core Mastery Module.

Derives the mastery state of a single question from the answer history.

Design:
- Unanswered: no event recorded for the question yet
- Unstable: answered, but the latest run is broken by a failure
  or holds fewer than STABLE_RUN_LENGTH successes
- Stable: the latest STABLE_RUN_LENGTH events are all successes;
  carries the slowest of those durations

The state is never cached. Recency wins: a single stumble among the
last attempts resets confidence instead of being averaged away.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from drill.core.history import HistoryLog

STABLE_RUN_LENGTH = 3


@dataclass(frozen=True)
class Unanswered:
    """No answer recorded for the question."""


@dataclass(frozen=True)
class Unstable:
    """Answered, but not yet proven stable."""


@dataclass(frozen=True)
class Stable:
    """Latest run of successes, with its worst (slowest) time."""

    worst_time: float


MasteryState = Union[Unanswered, Unstable, Stable]


def classify(history: HistoryLog, question_index: int) -> MasteryState:
    """
    Classify one question from the full history.

    Args:
        history: The answer log
        question_index: Index of the question in the bank

    Returns:
        Unanswered, Unstable or Stable(worst_time)
    """
    durations: list[float] = []
    for event in history.newest_first():
        if event.question_index != question_index:
            continue
        if event.duration is None:
            return Unstable()
        durations.append(event.duration)
        if len(durations) == STABLE_RUN_LENGTH:
            return Stable(worst_time=max(durations))

    return Unstable() if durations else Unanswered()
