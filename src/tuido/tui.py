"""tuido curses-based terminal user interface."""

import curses
import curses.ascii as ascii
import curses.textpad
import logging
import os
from typing import Dict, List, Optional, Union

from .core import Effect, apply_save_result, dispatch
from .models import Mode, Session, Task
from .render import Line, render
from .storage import StoreError, TaskStore

logger = logging.getLogger(__name__)

BLINK_MS = 530
PAD_Y, PAD_X = 1, 2

_SPECIAL_KEYS: Dict[int, str] = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_ENTER: "enter",
    curses.KEY_RESIZE: "resize",
}

_CONTROL_CHARS: Dict[str, str] = {
    "\n": "enter",
    "\r": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\t": "tab",
}


def translate_key(ch: Union[int, str]) -> Optional[str]:
    """Map a curses get_wch() result onto a key name, or None if unknown."""
    if isinstance(ch, int):
        return _SPECIAL_KEYS.get(ch)
    if ch in _CONTROL_CHARS:
        return _CONTROL_CHARS[ch]
    if len(ch) == 1 and ascii.isctrl(ch):
        return "ctrl+" + chr(ord(ch) + 96)
    return ch


def alt_key(ch: Union[int, str]) -> str:
    """Key name for ch pressed with Alt (read as ESC + ch)."""
    name = translate_key(ch)
    if name is None or name == "esc":
        return "esc"
    return "alt+" + name


class TUI:
    """Curses front end: reads keys, runs dispatch, saves, redraws."""

    def __init__(self, stdscr, store: TaskStore, tasks: List[Task]):
        self.stdscr = stdscr
        self.store = store
        self.session = Session.start(tasks)
        self.cursor_visible = True
        self.stdscr.keypad(True)
        self.height, self.width = self.stdscr.getmaxyx()

        self.styles = self._init_styles()

    def _init_styles(self) -> Dict[str, int]:
        styles = {"": curses.A_NORMAL, "caret": curses.A_REVERSE}
        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            if curses.COLORS >= 256:
                curses.init_pair(1, 230, 62)
                curses.init_pair(2, 205, -1)
                curses.init_pair(3, 240, -1)
                curses.init_pair(4, 241, -1)
                curses.init_pair(5, 62, -1)
            else:
                curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLUE)
                curses.init_pair(2, curses.COLOR_MAGENTA, -1)
                curses.init_pair(3, curses.COLOR_WHITE, -1)
                curses.init_pair(4, curses.COLOR_WHITE, -1)
                curses.init_pair(5, curses.COLOR_BLUE, -1)
            curses.init_pair(6, curses.COLOR_RED, -1)
            styles["title"] = curses.color_pair(1) | curses.A_BOLD
            styles["selected"] = curses.color_pair(2) | curses.A_BOLD
            styles["done"] = curses.color_pair(3) | curses.A_DIM
            styles["help"] = curses.color_pair(4) | curses.A_DIM
            styles["placeholder"] = curses.color_pair(4) | curses.A_DIM
            styles["border"] = curses.color_pair(5)
            styles["error"] = curses.color_pair(6) | curses.A_BOLD
        else:
            styles["title"] = curses.A_REVERSE | curses.A_BOLD
            styles["selected"] = curses.A_BOLD
            styles["done"] = curses.A_DIM
            styles["help"] = curses.A_DIM
            styles["placeholder"] = curses.A_DIM
            styles["border"] = curses.A_NORMAL
            styles["error"] = curses.A_BOLD
        return styles

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        if y < 0 or y >= self.height or x >= self.width:
            return
        try:
            self.stdscr.addnstr(y, x, text, self.width - x, attr)
        except curses.error:
            pass  # writing the bottom-right cell moves the cursor off-screen

    def draw(self):
        """Render the session inside a centered box."""
        self.stdscr.erase()
        self.height, self.width = self.stdscr.getmaxyx()

        lines = render(self.session, self.cursor_visible)
        content_w = max(sum(len(text) for text, _ in line) for line in lines)
        box_h = len(lines) + 2 * PAD_Y + 2
        box_w = content_w + 2 * PAD_X + 2
        y0 = max(0, (self.height - box_h) // 2)
        x0 = max(0, (self.width - box_w) // 2)

        if box_h <= self.height and box_w < self.width:
            self.stdscr.attron(self.styles["border"])
            curses.textpad.rectangle(self.stdscr, y0, x0, y0 + box_h - 1, x0 + box_w - 1)
            self.stdscr.attroff(self.styles["border"])

        top = y0 + 1 + PAD_Y
        left = x0 + 1 + PAD_X
        for i, line in enumerate(lines):
            self._draw_line(top + i, left, line)

        self.stdscr.refresh()

    def _draw_line(self, y: int, x: int, line: Line) -> None:
        for text, style in line:
            self._put(y, x, text, self.styles.get(style, curses.A_NORMAL))
            x += len(text)

    def read_key(self) -> Optional[str]:
        """Next key name; None when the blink timeout fires first."""
        self.stdscr.timeout(BLINK_MS if self.session.mode is Mode.EDITING else -1)
        try:
            ch = self.stdscr.get_wch()
        except curses.error:
            return None
        if ch == "\x1b":
            return self._read_alt()
        return translate_key(ch) or ""

    def _read_alt(self) -> str:
        """ESC followed at once by another key is Alt+key; a lone ESC is esc."""
        self.stdscr.timeout(0)
        try:
            ch = self.stdscr.get_wch()
        except curses.error:
            return "esc"
        return alt_key(ch)

    def handle(self, key: str) -> bool:
        """Process one key. Returns False once the session should end."""
        self.session, effects = dispatch(self.session, key)
        for effect in effects:
            if effect is Effect.QUIT:
                return False
            if effect is Effect.SAVE:
                self.save()
        return True

    def save(self):
        try:
            self.store.save(self.session.tasks)
        except StoreError as err:
            logger.exception("Save failed")
            self.session = apply_save_result(self.session, err)

    def run(self):
        """Main event loop."""
        logger.info("Session started with %d tasks", len(self.session.tasks))
        while True:
            self.draw()
            key = self.read_key()
            if key is None:
                self.cursor_visible = not self.cursor_visible
                continue
            self.cursor_visible = True
            if key == "resize":
                continue
            if not self.handle(key):
                break
        logger.info("Session ended with %d tasks", len(self.session.tasks))


def start_curses(store: TaskStore, tasks: List[Task]):
    """Initialize curses and run TUI."""

    def _main(stdscr):
        curses.raw()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        tui = TUI(stdscr, store, tasks)
        tui.run()

    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(_main)


def main(store: TaskStore, tasks: List[Task]) -> None:
    """TUI entry point."""
    start_curses(store, tasks)
