"""Screen layout as a pure function of the session.

Lines are lists of (text, style) segments; the curses layer decides what
each style looks like. Style tags: "" (plain), "title", "selected", "done",
"help", "caret", "placeholder", "error".
"""

from typing import List, Tuple

from .editbuffer import EditBuffer
from .models import INPUT_PLACEHOLDER, Mode, Session, Task

Segment = Tuple[str, str]
Line = List[Segment]

HEADER = " TODO MANAGER "
HELP_VIEW = "n: new • e: edit • space: toggle • backspace: delete • q: quit"
HELP_EDIT = "enter: save • esc: cancel"


def render_buffer(buffer: EditBuffer, cursor_visible: bool = True) -> Line:
    """Input box: prompt, text with a caret cell, or the placeholder hint."""
    segs: Line = [("> ", "")]
    caret_style = "caret" if cursor_visible else ""
    if not buffer.value:
        segs.append((INPUT_PLACEHOLDER[0], caret_style or "placeholder"))
        segs.append((INPUT_PLACEHOLDER[1:], "placeholder"))
        return segs
    before = buffer.value[: buffer.pos]
    under = buffer.value[buffer.pos : buffer.pos + 1] or " "
    after = buffer.value[buffer.pos + 1 :]
    if before:
        segs.append((before, ""))
    segs.append((under, caret_style))
    if after:
        segs.append((after, ""))
    return segs


def render_task(task: Task, selected: bool) -> Line:
    marker = ">" if selected else " "
    checked = "[x]" if task.done else "[ ]"
    if selected:
        style = "selected"
    elif task.done:
        style = "done"
    else:
        style = ""
    return [(f"{marker} {checked} ", ""), (task.title, style)]


def render(session: Session, cursor_visible: bool = True) -> List[Line]:
    """Build the full layout: header, task rows, help and status."""
    lines: List[Line] = [[(HEADER, "title")], []]

    editing = session.mode is Mode.EDITING
    for i, task in enumerate(session.tasks):
        if editing and i == session.cursor:
            checked = "[x]" if task.done else "[ ]"
            lines.append([(f"> {checked} ", "")] + render_buffer(session.buffer, cursor_visible))
        else:
            lines.append(render_task(task, i == session.cursor))

    lines.append([])
    lines.append([(HELP_EDIT if editing else HELP_VIEW, "help")])
    if session.status:
        lines.append([(session.status, "error")])
    return lines


def plain(lines: List[Line]) -> List[str]:
    """Drop styles, keeping only the text of each line."""
    return ["".join(text for text, _ in line) for line in lines]
