"""
Core Module - the adaptive drill algorithm.

Components:
- history: append-only answer log (AnswerEvent, HistoryLog)
- mastery: per-question state derived from history (classify)
- calibration: target time establishment and tightening
- picker: next question and replacement selection
- rotation: the per-answer working set transition (on_answer)
- state: DrillState, Question and the default bank

Nothing here does I/O; the trainer package owns console and storage.
"""

from drill.core.history import AnswerEvent, HistoryLog
from drill.core.mastery import MasteryState, Stable, Unanswered, Unstable, classify
from drill.core.state import (
    MAX_WORKING_SET_SIZE,
    DrillState,
    Question,
    create_initial_state,
    default_bank,
)
from drill.core.calibration import maybe_establish_target_time, upper_median
from drill.core.picker import next_question, pick_replacement
from drill.core.rotation import find_removal_candidate, on_answer

__all__ = [
    "AnswerEvent",
    "HistoryLog",
    "MasteryState",
    "Stable",
    "Unanswered",
    "Unstable",
    "classify",
    "MAX_WORKING_SET_SIZE",
    "DrillState",
    "Question",
    "create_initial_state",
    "default_bank",
    "maybe_establish_target_time",
    "upper_median",
    "next_question",
    "pick_replacement",
    "find_removal_candidate",
    "on_answer",
]
