"""Interaction state machine (pure functions, no I/O).

``dispatch`` maps one key press onto a new Session plus the effects the
event loop has to carry out. Nothing here touches the terminal or disk.
"""

from enum import Enum
from typing import List, Optional, Tuple

from .models import PLACEHOLDER_TITLE, Mode, Session, Task

QUIT_KEYS = ("q", "ctrl+c")
UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")
TOGGLE_KEYS = ("enter", " ")
DELETE_KEYS = ("backspace", "delete")
EDIT_KEYS = ("e",)
NEW_KEYS = ("n",)
CONFIRM_KEYS = ("enter",)
CANCEL_KEYS = ("esc",)


class Effect(Enum):
    """Side effects requested by dispatch."""

    SAVE = "save"
    QUIT = "quit"


def clamp_cursor(cursor: int, tasks: List[Task]) -> int:
    """Clamp cursor into range; 0 for an empty list."""
    if not tasks:
        return 0
    return max(0, min(len(tasks) - 1, cursor))


def toggle_task(tasks: List[Task], index: int) -> None:
    tasks[index].done = not tasks[index].done


def delete_task(tasks: List[Task], index: int) -> int:
    """Remove tasks[index] and return the cursor to use afterwards."""
    del tasks[index]
    if index >= len(tasks) and index > 0:
        index -= 1
    return index


def apply_save_result(session: Session, error: Optional[BaseException]) -> Session:
    """Record a failed save in the status banner."""
    if error is None:
        return session
    new = session.copy()
    new.status = f"Save failed: {error}"
    return new


def _dispatch_viewing(s: Session, key: str) -> List[Effect]:
    if key in QUIT_KEYS:
        return [Effect.QUIT]

    if key in UP_KEYS:
        s.cursor = max(s.cursor - 1, 0)
    elif key in DOWN_KEYS:
        s.cursor = clamp_cursor(s.cursor + 1, s.tasks)

    elif key in TOGGLE_KEYS:
        if s.tasks:
            toggle_task(s.tasks, s.cursor)
            return [Effect.SAVE]
    elif key in DELETE_KEYS:
        if s.tasks:
            s.cursor = delete_task(s.tasks, s.cursor)
            return [Effect.SAVE]

    elif key in EDIT_KEYS:
        if s.tasks:
            s.mode = Mode.EDITING
            s.buffer.set_value(s.selected.title)
    elif key in NEW_KEYS:
        s.tasks.append(Task(id=s.next_id, title=PLACEHOLDER_TITLE, done=False))
        s.next_id += 1
        s.cursor = len(s.tasks) - 1
        s.mode = Mode.EDITING
        s.buffer.reset()
    return []


def _dispatch_editing(s: Session, key: str) -> List[Effect]:
    if key in CONFIRM_KEYS:
        s.selected.title = s.buffer.value
        s.mode = Mode.VIEWING
        s.buffer.reset()
        return [Effect.SAVE]
    if key in CANCEL_KEYS:
        s.mode = Mode.VIEWING
        s.buffer.reset()
        return []
    s.buffer.update(key)
    return []


def dispatch(session: Session, key: str) -> Tuple[Session, List[Effect]]:
    """Apply one key press.

    Returns (new_session, effects). The given session is left untouched.
    """
    new = session.copy()
    new.status = ""
    if new.mode is Mode.EDITING:
        effects = _dispatch_editing(new, key)
    else:
        effects = _dispatch_viewing(new, key)
    return new, effects
