"""Single-line text input used while editing a task title."""

from typing import Callable, Dict

CHAR_LIMIT = 156


def _is_word_char(ch: str) -> bool:
    return not ch.isspace()


class EditBuffer:
    """Readline-style text field: a value, a caret and a character cap.

    Keys arrive as names ("left", "ctrl+w", "a", " ") and are applied by
    :meth:`update`. The caret position is an index into ``value`` and is
    always in ``0..len(value)``.
    """

    def __init__(self, value: str = "", pos: int = 0, char_limit: int = CHAR_LIMIT):
        self.char_limit = char_limit
        self.value = value[:char_limit]
        self.pos = max(0, min(pos, len(self.value)))

    def __repr__(self) -> str:
        return f"EditBuffer(value={self.value!r}, pos={self.pos})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditBuffer):
            return NotImplemented
        return (self.value, self.pos, self.char_limit) == (
            other.value,
            other.pos,
            other.char_limit,
        )

    def copy(self) -> "EditBuffer":
        return EditBuffer(self.value, self.pos, self.char_limit)

    # -------------------- whole-value operations --------------------
    def set_value(self, text: str) -> None:
        """Replace the text and put the caret at the end."""
        self.value = text[: self.char_limit]
        self.pos = len(self.value)

    def reset(self) -> None:
        self.value = ""
        self.pos = 0

    def insert(self, text: str) -> None:
        room = self.char_limit - len(self.value)
        if room <= 0:
            return
        text = text[:room]
        self.value = self.value[: self.pos] + text + self.value[self.pos :]
        self.pos += len(text)

    # -------------------- caret movement --------------------
    def left(self) -> None:
        self.pos = max(0, self.pos - 1)

    def right(self) -> None:
        self.pos = min(len(self.value), self.pos + 1)

    def home(self) -> None:
        self.pos = 0

    def end(self) -> None:
        self.pos = len(self.value)

    def word_left(self) -> None:
        i = self.pos
        while i > 0 and not _is_word_char(self.value[i - 1]):
            i -= 1
        while i > 0 and _is_word_char(self.value[i - 1]):
            i -= 1
        self.pos = i

    def word_right(self) -> None:
        i, n = self.pos, len(self.value)
        while i < n and not _is_word_char(self.value[i]):
            i += 1
        while i < n and _is_word_char(self.value[i]):
            i += 1
        self.pos = i

    # -------------------- deletion --------------------
    def backspace(self) -> None:
        if self.pos == 0:
            return
        self.value = self.value[: self.pos - 1] + self.value[self.pos :]
        self.pos -= 1

    def delete(self) -> None:
        self.value = self.value[: self.pos] + self.value[self.pos + 1 :]

    def delete_word_backward(self) -> None:
        end = self.pos
        self.word_left()
        self.value = self.value[: self.pos] + self.value[end:]

    def kill_to_end(self) -> None:
        self.value = self.value[: self.pos]

    def kill_to_start(self) -> None:
        self.value = self.value[self.pos :]
        self.pos = 0

    # -------------------- key dispatch --------------------
    def update(self, key: str) -> bool:
        """Apply one key. Returns False when the key means nothing here."""
        action = _KEYMAP.get(key)
        if action is not None:
            action(self)
            return True
        if len(key) == 1 and key.isprintable():
            self.insert(key)
            return True
        return False


_KEYMAP: Dict[str, Callable[[EditBuffer], None]] = {
    "left": EditBuffer.left,
    "ctrl+b": EditBuffer.left,
    "right": EditBuffer.right,
    "ctrl+f": EditBuffer.right,
    "home": EditBuffer.home,
    "ctrl+a": EditBuffer.home,
    "end": EditBuffer.end,
    "ctrl+e": EditBuffer.end,
    "alt+left": EditBuffer.word_left,
    "alt+b": EditBuffer.word_left,
    "alt+right": EditBuffer.word_right,
    "alt+f": EditBuffer.word_right,
    "backspace": EditBuffer.backspace,
    "ctrl+h": EditBuffer.backspace,
    "delete": EditBuffer.delete,
    "ctrl+d": EditBuffer.delete,
    "ctrl+w": EditBuffer.delete_word_backward,
    "alt+backspace": EditBuffer.delete_word_backward,
    "ctrl+k": EditBuffer.kill_to_end,
    "ctrl+u": EditBuffer.kill_to_start,
}
