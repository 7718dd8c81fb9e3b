"""
Question selection.

next_question() picks what to ask from the working set; pick_replacement()
picks which dormant question joins the working set after a removal.
Randomness always comes from the caller's generator.
"""

from __future__ import annotations

import random

from drill.core.history import HistoryLog
from drill.core.mastery import Stable, Unanswered, Unstable, classify
from drill.core.state import DrillState


def next_question(working_set: set[int], history: HistoryLog, rng: random.Random) -> int:
    """
    Uniform pick among the working set, never repeating the last asked
    question unless it is the only member.

    Raises:
        ValueError: If the working set is empty
    """
    if not working_set:
        raise ValueError("Cannot pick a question from an empty working set")

    candidates = sorted(working_set)
    previous = history.last.question_index if history.last else None
    while True:
        question_index = rng.choice(candidates)
        if len(candidates) == 1 or question_index != previous:
            return question_index


def pick_replacement(state: DrillState, rng: random.Random) -> tuple[int, float | None]:
    """
    Choose the dormant question to activate.

    Buckets, first non-empty wins:
    1. unanswered (random pick)
    2. unstable (random pick)
    3. stable, the one with the largest worst time

    Returns:
        (question_index, worst_time) where worst_time is only set for bucket 3

    Raises:
        ValueError: If the dormant pool is empty
    """
    unanswered: list[int] = []
    unstable: list[int] = []
    with_times: list[tuple[float, int]] = []
    for question_index in state.dormant():
        mastery = classify(state.history, question_index)
        if isinstance(mastery, Unanswered):
            unanswered.append(question_index)
        elif isinstance(mastery, Unstable):
            unstable.append(question_index)
        elif isinstance(mastery, Stable):
            with_times.append((mastery.worst_time, question_index))

    state.note(
        f"Finding new q, unanswered: {len(unanswered)}, unstable: {len(unstable)}, "
        f"with times: {len(with_times)}"
    )

    if unanswered:
        question_index = rng.choice(unanswered)
        state.note(f"Picking unanswered {state.prompt_of(question_index)}")
        return question_index, None
    if unstable:
        question_index = rng.choice(unstable)
        state.note(f"Picking unstable {state.prompt_of(question_index)}")
        return question_index, None
    if not with_times:
        raise ValueError("No dormant question left to activate")

    worst_time, question_index = sorted(with_times)[-1]
    state.note(f"Picking with worst time {state.prompt_of(question_index)}")
    return question_index, worst_time
