"""
Drill Session: the interactive control loop.

Architecture:
- Console I/O -> drill.trainer.console_io
- Algorithm -> drill.core (picker, rotation)
- State/Persistence -> drill.trainer.state_store

One answer is fully processed and saved before the next prompt.
"""

from __future__ import annotations

import random

from loguru import logger

from drill.core.picker import next_question
from drill.core.rotation import on_answer
from drill.core.state import (
    MAX_WORKING_SET_SIZE,
    DrillState,
    Question,
    create_initial_state,
    default_bank,
)
from drill.trainer.console_io import ConsoleIO
from drill.trainer.state_store import StateStore

RETRY_PREFIX = "Think again, "
FINAL_MESSAGE = "CONGRATULATIONS, you know all the numbers! Bye!"


class DrillSession:
    """
    Orchestrator for the drill loop.
    Decouples console, algorithm and storage.
    """

    def __init__(
        self,
        name: str,
        store: StateStore,
        io: ConsoleIO,
        rng: random.Random | None = None,
        working_set_size: int = MAX_WORKING_SET_SIZE,
        bank_range: tuple[int, int] = (1, 10),
        skip_first_answer: bool = True,
    ):
        self.name = name
        self.store = store
        self.io = io
        self.rng = rng or random.Random()
        self.working_set_size = working_set_size
        self.bank_range = bank_range
        self.skip_first_answer = skip_first_answer
        self.state: DrillState | None = None

    def load_state(self) -> DrillState:
        """Resume the named session or start a fresh one."""
        state = self.store.load(self.name)
        if state is None:
            logger.info(f"No saved session '{self.name}', starting with the default bank")
            state = create_initial_state(
                default_bank(*self.bank_range), self.rng, self.working_set_size
            )
        self.state = state
        return state

    def ask(self, question: Question) -> float | None:
        """
        Prompt until the answer is correct.

        Returns:
            Seconds taken by the first attempt, or None if any attempt was wrong
        """
        prompt = f"{question.prompt} = "
        failed = False
        while True:
            text, elapsed = self.io.ask(prompt)
            if text.strip() == question.answer:
                return None if failed else elapsed
            failed = True
            prompt = f"{RETRY_PREFIX}{question.prompt} = "

    def announce_mastered(self, question: Question) -> None:
        self.io.congratulate(
            f"CONGRATULATIONS! You seem to know that {question.prompt} = {question.answer} very well!"
        )

    def play_turn(self, state: DrillState) -> bool:
        """
        Ask one question and apply the answer.

        Returns:
            True if the target time changed during the turn
        """
        question_index = next_question(state.working_set, state.history, self.rng)
        duration = self.ask(state.bank[question_index])

        if duration is not None:
            state.note(f"Got answer with time {duration} sec")
        else:
            state.note("Got failed answer")

        before = state.target_time
        on_answer(state, question_index, duration, self.rng, on_mastered=self.announce_mastered)
        self.store.save(self.name, state)
        return state.target_time != before

    def run(self) -> int:
        """Drill until the target time moves. Returns the process exit code."""
        state = self.state or self.load_state()

        if self.skip_first_answer:
            question_index = next_question(state.working_set, state.history, self.rng)
            self.ask(state.bank[question_index])
            state.note("Skipping first answer")

        while True:
            if self.play_turn(state):
                self.io.congratulate(FINAL_MESSAGE)
                return 0
