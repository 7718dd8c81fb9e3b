"""
State persistence for drill sessions.

Enables resume: the whole state is written as one JSON file per session
name, {name}.json, overwritten after every processed answer.

A missing or unreadable file means "no prior session". A file that exists
but does not parse into a valid record is an error: it is never
silently replaced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from drill.core.history import AnswerEvent, HistoryLog
from drill.core.state import DrillState, Question


class StateFormatError(Exception):
    """A state file exists but is not a valid record."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Malformed state file {path}: {detail}")


# =============================================================================
# Record schema
# =============================================================================


class QuestionRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    q: str
    a: str


class HistoryRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    qa_idx: int = Field(alias="qaIdx")
    time: Optional[float]  # required key, null marks a failed turn


class StateRecord(BaseModel):
    """On-disk layout of a DrillState. Every key is required and no value is coerced."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    qas: list[QuestionRecord]
    current_set: list[int] = Field(alias="currentSet")
    target_time: Optional[float] = Field(alias="targetTime")
    hs: list[HistoryRecord]
    log: list[str]

    @model_validator(mode="after")
    def check_indices(self) -> "StateRecord":
        size = len(self.qas)
        if not self.current_set:
            raise ValueError("currentSet is empty")
        for idx in self.current_set:
            if not 0 <= idx < size:
                raise ValueError(f"currentSet index {idx} outside bank of {size}")
        if len(set(self.current_set)) != len(self.current_set):
            raise ValueError("currentSet holds duplicate indices")
        for item in self.hs:
            if not 0 <= item.qa_idx < size:
                raise ValueError(f"hs index {item.qa_idx} outside bank of {size}")
        return self

    @classmethod
    def from_state(cls, state: DrillState) -> "StateRecord":
        return cls(
            qas=[QuestionRecord(q=x.prompt, a=x.answer) for x in state.bank],
            current_set=sorted(state.working_set),
            target_time=state.target_time,
            hs=[HistoryRecord(qa_idx=x.question_index, time=x.duration) for x in state.history],
            log=list(state.log),
        )

    def to_state(self) -> DrillState:
        return DrillState(
            bank=[Question(prompt=x.q, answer=x.a) for x in self.qas],
            working_set=set(self.current_set),
            target_time=self.target_time,
            history=HistoryLog(
                events=[AnswerEvent(question_index=x.qa_idx, duration=x.time) for x in self.hs]
            ),
            log=list(self.log),
        )


# =============================================================================
# Store
# =============================================================================


class StateStore:
    """
    Manages state persistence.

    One JSON file per session name inside state_dir.
    """

    def __init__(self, state_dir: Optional[Path] = None):
        self.state_dir = state_dir or Path(".")

    def path_for(self, name: str) -> Path:
        return self.state_dir / f"{name}.json"

    def save(self, name: str, state: DrillState) -> Path:
        """Overwrite the session file with a full snapshot."""
        filepath = self.path_for(name)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        record = StateRecord.from_state(state)

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(record.model_dump_json(by_alias=True, indent=4))
            f.write("\n")

        return filepath

    def load(self, name: str) -> Optional[DrillState]:
        """
        Load a session by name.

        Returns:
            The stored state, or None if there is no readable file

        Raises:
            StateFormatError: If the file is readable but not a valid record
        """
        filepath = self.path_for(name)
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                contents = f.read()
        except UnicodeDecodeError as e:
            raise StateFormatError(filepath, str(e)) from e
        except FileNotFoundError:
            logger.info(f"No state file {filepath}, starting fresh")
            return None
        except OSError as e:
            logger.warning(f"Can't read state file {filepath}, starting fresh: {e}")
            return None

        try:
            record = StateRecord.model_validate_json(contents)
        except ValidationError as e:
            raise StateFormatError(filepath, str(e)) from e

        logger.info(f"Loaded state from {filepath}")
        return record.to_state()
