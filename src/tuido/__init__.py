"""tuido - a keyboard-driven terminal task list."""

__version__ = "1.0.0"

from .models import Task, Mode, Session, DEFAULT_PATH
from .editbuffer import EditBuffer
from .storage import TaskStore, StoreError, IOFailure, ParseFailure
from .core import Effect, dispatch, apply_save_result

__all__ = [
    "Task",
    "Mode",
    "Session",
    "DEFAULT_PATH",
    "EditBuffer",
    "TaskStore",
    "StoreError",
    "IOFailure",
    "ParseFailure",
    "Effect",
    "dispatch",
    "apply_save_result",
]
