"""Data models and constants for tuido."""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List

from .editbuffer import EditBuffer

DEFAULT_DIR = os.path.expanduser("~/.tuido")
DEFAULT_PATH = os.path.join(DEFAULT_DIR, "tasks.json")
DEFAULT_LOG_PATH = os.path.join(DEFAULT_DIR, "tuido.log")

PLACEHOLDER_TITLE = "New Task"
INPUT_PLACEHOLDER = "Task name..."


def next_task_id(tasks: List["Task"]) -> int:
    """Smallest id greater than every id in the list."""
    return max((t.id for t in tasks), default=0) + 1


class Mode(Enum):
    """Session phase: browsing the list or typing a title."""

    VIEWING = "viewing"
    EDITING = "editing"


@dataclass
class Task:
    """A single to-do entry."""

    id: int
    title: str
    done: bool = False


@dataclass
class Session:
    """Everything the controller owns between two key presses."""

    tasks: List[Task] = field(default_factory=list)
    cursor: int = 0
    mode: Mode = Mode.VIEWING
    buffer: EditBuffer = field(default_factory=EditBuffer)
    next_id: int = 1
    status: str = ""  # transient banner, cleared on the next key

    @classmethod
    def start(cls, tasks: List[Task]) -> "Session":
        """Initial state for a freshly loaded list."""
        return cls(tasks=list(tasks), next_id=next_task_id(tasks))

    @property
    def selected(self) -> Task:
        return self.tasks[self.cursor]

    def copy(self) -> "Session":
        return replace(
            self,
            tasks=[replace(t) for t in self.tasks],
            buffer=self.buffer.copy(),
        )
