"""
Trainer Module - everything around the core algorithm that touches the outside world.

- console_io: timed prompts over a rich console
- state_store: JSON snapshot persistence
- session: the interactive drill loop
"""

from drill.trainer.console_io import ConsoleIO
from drill.trainer.session import DrillSession
from drill.trainer.state_store import StateFormatError, StateRecord, StateStore

__all__ = ["ConsoleIO", "DrillSession", "StateFormatError", "StateRecord", "StateStore"]
