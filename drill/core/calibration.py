"""
Target time calibration.

The target time is the response time under which a stable question is
considered known. It is established once, from the first successful
answer of every working-set question, and afterwards only ever lowered.
"""

from __future__ import annotations

from drill.core.state import DrillState


def upper_median(values: list[float]) -> float:
    """Median without averaging: the element at len // 2 once sorted."""
    if not values:
        raise ValueError("upper_median() requires at least one value")
    return sorted(values)[len(values) // 2]


def first_success_times(state: DrillState) -> list[float]:
    """Duration of the earliest success of each working-set question that has one."""
    times = []
    for question_index in sorted(state.working_set):
        event = state.history.first_success(question_index)
        if event is not None:
            times.append(event.duration)
    return times


def maybe_establish_target_time(state: DrillState) -> float | None:
    """
    Set the target time once every working-set question has succeeded.

    No-op when the target time is already set.

    Returns:
        The target time after the attempt (None while the quorum is incomplete)
    """
    if state.target_time is not None:
        return state.target_time

    times = first_success_times(state)
    if times and len(times) == len(state.working_set):
        state.target_time = upper_median(times)
        state.note(f"Establish target time to median: {state.target_time}")
    else:
        collected = " ".join(str(t) for t in times)
        state.note(f"Couldn't establish target time for current set results: {collected}")
    return state.target_time


def tighten_target_time(state: DrillState, candidate: float) -> bool:
    """Lower the target time to candidate if it is smaller. Returns True on change."""
    if state.target_time is None or candidate >= state.target_time:
        return False
    state.note(f"Reducing target time {state.target_time} -> {candidate}")
    state.target_time = candidate
    return True
