"""
Drill state.

Holds everything a session owns: the question bank, the working set,
the target time, the answer history and the diagnostic log.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from loguru import logger

from drill.core.history import HistoryLog

MAX_WORKING_SET_SIZE = 7


@dataclass(frozen=True)
class Question:
    """A prompt and its expected answer."""

    prompt: str
    answer: str


@dataclass
class DrillState:
    """Mutable state of one drill session."""

    bank: list[Question]
    working_set: set[int] = field(default_factory=set)
    target_time: float | None = None
    history: HistoryLog = field(default_factory=HistoryLog)
    log: list[str] = field(default_factory=list)

    def note(self, message: str) -> None:
        """Append a diagnostic to the persisted log."""
        logger.bind(diagnostic=True).debug(message)
        self.log.append(message)

    def dormant(self) -> list[int]:
        """Bank indices outside the working set, in bank order."""
        return [i for i in range(len(self.bank)) if i not in self.working_set]

    def prompt_of(self, question_index: int) -> str:
        return self.bank[question_index].prompt


def default_bank(low: int = 1, high: int = 10) -> list[Question]:
    """Every sum of two operands in [low, high]."""
    return [
        Question(prompt=f"{i} + {j}", answer=str(i + j))
        for i in range(low, high + 1)
        for j in range(low, high + 1)
    ]


def create_initial_state(
    bank: list[Question],
    rng: random.Random,
    size: int = MAX_WORKING_SET_SIZE,
) -> DrillState:
    """
    Build a fresh state with a randomly sampled working set.

    Raises:
        ValueError: If the bank holds fewer questions than the working set needs
    """
    if len(bank) < size:
        raise ValueError(f"Question bank has {len(bank)} questions, need at least {size}")

    state = DrillState(bank=list(bank), working_set=set(rng.sample(range(len(bank)), size)))
    prompts = ", ".join(state.prompt_of(i) for i in sorted(state.working_set))
    state.note(f"Initialized with current set: {prompts}")
    return state
