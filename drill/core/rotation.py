"""
Working set rotation.

on_answer() is the per-turn state transition: record the answer, make
sure a target time exists, retire the best-known question from the
working set and bring in a dormant one.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from drill.core.calibration import maybe_establish_target_time, tighten_target_time
from drill.core.mastery import Stable, classify
from drill.core.picker import pick_replacement
from drill.core.state import DrillState, Question


def find_removal_candidate(state: DrillState) -> tuple[int, float] | None:
    """
    The stable working-set question with the smallest worst time at or
    under the target time. Ties go to the lowest index.
    """
    if state.target_time is None:
        return None

    best: tuple[int, float] | None = None
    threshold = state.target_time
    for question_index in sorted(state.working_set):
        mastery = classify(state.history, question_index)
        if not isinstance(mastery, Stable) or mastery.worst_time > threshold:
            continue
        if best is None or mastery.worst_time < threshold:
            threshold = mastery.worst_time
            best = (question_index, mastery.worst_time)
    return best


def on_answer(
    state: DrillState,
    question_index: int,
    duration: float | None,
    rng: random.Random,
    on_mastered: Callable[[Question], None] | None = None,
) -> int | None:
    """
    Apply one answered turn to the state.

    Args:
        state: Drill state, mutated in place
        question_index: The question that was asked
        duration: Seconds to the first correct answer, None if any attempt failed
        rng: Random source for the replacement pick
        on_mastered: Called with the question retired from the working set

    Returns:
        Index of the question that replaced a retired one, or None if the
        working set did not change
    """
    state.history.record(question_index, duration)

    if maybe_establish_target_time(state) is None:
        state.note("No change in current set")
        return None

    candidate = find_removal_candidate(state)
    if candidate is None:
        state.note(
            "Not removing item, all items in current set are unstable or above "
            f"target time {state.target_time}"
        )
        return None

    removed, worst_time = candidate
    question = state.bank[removed]
    state.note(f"Removing {question.prompt}, it's time {worst_time} <= target time {state.target_time}")
    if on_mastered is not None:
        on_mastered(question)
    state.working_set.discard(removed)

    replacement, replacement_time = pick_replacement(state, rng)
    if replacement_time is not None:
        tighten_target_time(state, replacement_time)
    state.working_set.add(replacement)
    return replacement
