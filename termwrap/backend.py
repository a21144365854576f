from __future__ import annotations

"""
curses rendering backend.

Thin layer between the layout core and the terminal: prints text slices at
screen rows, owns color pairs, and runs an input-reader thread that forwards
key events through a bounded queue.

Usage:
  backend = Backend(stdscr)
  backend.start()
  backend.render_lines(text, LinesIterator(text, cols))
  ev = backend.poll_event(timeout=0.1)
  backend.stop()
"""

import curses
import logging
import queue
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .colors import Color, TerminalDefault, to_curses
from .tokens import Span


log = logging.getLogger("termwrap.backend")

_KEY_NAMES: Dict[int, str] = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_NPAGE: "page_down",
    curses.KEY_PPAGE: "page_up",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_ENTER: "enter",
    curses.KEY_RESIZE: "resize",
}

_CHAR_NAMES: Dict[str, str] = {
    "\n": "enter",
    "\r": "enter",
    "\x1b": "esc",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
}


@dataclass(frozen=True)
class Event:
    kind: str  # 'char' | 'key' | 'resize' | 'unknown'
    value: object = None


def event_from_key(ch) -> Event:
    """Translate a `get_wch()` result into an Event."""
    if isinstance(ch, str):
        name = _CHAR_NAMES.get(ch)
        if name is not None:
            return Event("key", name)
        return Event("char", ch)
    name = _KEY_NAMES.get(ch)
    if name == "resize":
        return Event("resize")
    if name is not None:
        return Event("key", name)
    return Event("unknown", ch)


class InputReader(threading.Thread):
    """Background reader: window.get_wch() -> Event -> bounded queue.

    The window is shared with the drawing thread, so every read happens under
    `lock` and never blocks: get_wch() in nodelay mode, then the thread waits
    `poll_ms` with the lock released.
    """

    def __init__(self, window, events: "queue.Queue[Event]", *, lock: Optional[threading.Lock] = None, poll_ms: int = 100):
        super().__init__(daemon=True, name="termwrap-input")
        self.window = window
        self.events = events
        self.lock = lock if lock is not None else threading.Lock()
        self.poll_ms = poll_ms
        self.stop_event = threading.Event()

    def _read(self):
        with self.lock:
            try:
                return self.window.get_wch()
            except curses.error:
                # no key pending
                return None

    def run(self) -> None:
        with self.lock:
            self.window.nodelay(True)
        while not self.stop_event.is_set():
            ch = self._read()
            if ch is None:
                self.stop_event.wait(self.poll_ms / 1000.0)
                continue
            ev = event_from_key(ch)
            while not self.stop_event.is_set():
                try:
                    self.events.put(ev, timeout=self.poll_ms / 1000.0)
                    break
                except queue.Full:
                    continue

    def stop(self) -> None:
        self.stop_event.set()


class Backend:
    """Renderer boundary over one curses window.

    All curses calls go through `lock`, which the input reader shares.
    """

    def __init__(self, stdscr, *, queue_size: int = 64, use_colors: bool = True, poll_ms: int = 50):
        self.stdscr = stdscr
        self.use_colors = use_colors
        self.poll_ms = poll_ms
        self.lock = threading.Lock()
        self.events: "queue.Queue[Event]" = queue.Queue(maxsize=max(1, queue_size))
        self.reader: Optional[InputReader] = None
        self.colors = 8
        # style name -> (pair id, attr)
        self.styles: Dict[str, Tuple[int, int]] = {}

    def start(self) -> None:
        with self.lock:
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            if self.use_colors:
                self._init_colors()
        self.reader = InputReader(self.stdscr, self.events, lock=self.lock, poll_ms=self.poll_ms)
        self.reader.start()
        log.debug("backend started (colors=%s)", self.colors if self.use_colors else 0)

    def stop(self) -> None:
        if self.reader is not None:
            self.reader.stop()
            self.reader.join(timeout=1.0)
            self.reader = None
        log.debug("backend stopped")

    def _init_colors(self) -> None:
        if not curses.has_colors():
            self.use_colors = False
            return
        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            pass
        self.colors = int(getattr(curses, "COLORS", 8) or 8)

    def register_style(self, name: str, fg: Color, bg: Color = TerminalDefault(), bold: bool = False) -> int:
        """Allocate a color pair for `name` and return its curses attribute."""
        attr = curses.A_BOLD if bold else 0
        if self.use_colors:
            pair = len(self.styles) + 1
            with self.lock:
                curses.init_pair(pair, to_curses(fg, self.colors), to_curses(bg, self.colors))
                attr |= curses.color_pair(pair)
        else:
            pair = 0
        self.styles[name] = (pair, attr)
        return attr

    def screen_size(self) -> Tuple[int, int]:
        with self.lock:
            rows, cols = self.stdscr.getmaxyx()
        return int(rows), int(cols)

    def clear(self) -> None:
        with self.lock:
            self.stdscr.erase()

    def refresh(self) -> None:
        with self.lock:
            self.stdscr.refresh()

    def print_at(self, row: int, col: int, text: str, style: Optional[str] = None) -> None:
        attr = self.styles[style][1] if style else 0
        with self.lock:
            try:
                self.stdscr.addstr(row, col, text, attr)
            except curses.error:
                # writing the bottom-right cell moves the cursor off screen
                pass

    def render_lines(self, text: str, lines: Iterable[Span], first_row: int = 0, style: Optional[str] = None) -> int:
        """Print each span of `text` on successive rows; return rows drawn."""
        rows, _ = self.screen_size()
        drawn = 0
        for row, span in zip(range(first_row, rows), lines):
            self.print_at(row, 0, text[span.start:span.end], style)
            drawn += 1
        return drawn

    def poll_event(self, timeout: Optional[float] = None) -> Optional[Event]:
        """Next input event; None when `timeout` elapses (0 = don't wait)."""
        try:
            if timeout is not None and timeout <= 0:
                return self.events.get_nowait()
            return self.events.get(timeout=timeout)
        except queue.Empty:
            return None


__all__ = ["Backend", "Event", "InputReader", "event_from_key"]
