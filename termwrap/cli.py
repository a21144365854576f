from __future__ import annotations

"""
Command-line front end: wrap a file (or stdin) to a column width.

  termwrap DEBUG --width=40 notes.txt       -> wrapped lines on stdout
  termwrap --truncate -w 20 < names.txt     -> one ellipsized line per input line
  termwrap --tui notes.txt                  -> curses pager (q to quit)
"""

import curses
import logging
import os
import shutil
import sys
from dataclasses import dataclass, field
from itertools import islice
from typing import List, MutableMapping, Optional, TextIO

from .backend import Backend, Event
from .config import Settings
from .error_codes import AppError
from .lines import LinesIterator
from .log import configure_logging
from .truncate import ellipsize, pad_to_width


log = logging.getLogger('termwrap.cli')

USAGE = (
    'Usage: termwrap [LEVEL] [options] [FILE]\n'
    '  LEVEL: DEBUG|INFO|WARNING|ERROR (sets LOG_LEVEL)\n'
    'Options:\n'
    '  --width=N | -w N            Column budget (default: terminal width)\n'
    '  --no-break                  Keep words longer than a line whole\n'
    '  --truncate                  Ellipsize each input line instead of wrapping\n'
    '  --tui                       Page through the wrapped text (needs FILE)\n'
    '  --log-file=PATH | -l PATH   Write logs to PATH (rotating)\n'
    '  --stderr                    Also log to stderr\n'
    '  --json                      JSON-formatted logs\n'
    'Examples:\n'
    '  termwrap --width=40 README.md\n'
    '  termwrap DEBUG --stderr -w 20 - < notes.txt\n'
)

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@dataclass
class CliArgs:
    mode: str = 'wrap'  # 'wrap' | 'truncate' | 'tui' | 'help'
    paths: List[str] = field(default_factory=list)


def apply_cli_args(argv: List[str], env: MutableMapping[str, str]) -> CliArgs:
    """Translate flags into environment settings; return mode and paths."""
    out = CliArgs()
    args = list(argv)
    i = 0
    while i < len(args):
        a = (args[i] or '').strip()
        if a in _LEVELS:
            env['LOG_LEVEL'] = a
        elif a.startswith('--width='):
            env['TERMWRAP_WIDTH'] = a.split('=', 1)[1]
        elif a in ('-w', '--width') and i + 1 < len(args):
            env['TERMWRAP_WIDTH'] = args[i + 1]
            i += 1
        elif a.startswith('--log-file='):
            env['TERMWRAP_LOG_FILE'] = a.split('=', 1)[1]
        elif a in ('-l', '--log-file') and i + 1 < len(args):
            env['TERMWRAP_LOG_FILE'] = args[i + 1]
            i += 1
        elif a == '--stderr':
            env['TERMWRAP_LOG_STDERR'] = '1'
        elif a == '--json':
            env['LOG_JSON'] = '1'
        elif a == '--no-break':
            env['TERMWRAP_BREAK_WORDS'] = '0'
        elif a == '--truncate':
            out.mode = 'truncate'
        elif a == '--tui':
            out.mode = 'tui'
        elif a in ('--help', '-h'):
            out.mode = 'help'
        elif a.startswith('-') and a != '-':
            raise AppError('E006', 'cli.args', f'unknown option {a}')
        else:
            out.paths.append(a)
        i += 1
    if len(out.paths) > 1:
        raise AppError('E006', 'cli.args', 'at most one FILE is accepted')
    return out


def read_input(path: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """Read FILE (or stdin for None / '-') as strict UTF-8."""
    try:
        if path in (None, '-'):
            src = stdin if stdin is not None else sys.stdin
            raw = src.buffer.read() if hasattr(src, 'buffer') else src.read()
        else:
            with open(path, 'rb') as f:
                raw = f.read()
    except OSError as e:
        raise AppError('E004', 'cli.read', f'{path}: {e.strerror or e}') from e
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise AppError('E003', 'cli.read', f'{e.reason} at byte {e.start}') from e


def next_top(top: int, ev: Optional[Event], body: int, more: bool) -> Optional[int]:
    """Pager scroll position after `ev`; None means quit."""
    if ev is None:
        return top
    key = ev.value if ev.kind in ('key', 'char') else None
    if key in ('q', 'Q', 'esc'):
        return None
    if key in ('down', 'j', 'enter'):
        return top + 1 if more else top
    if key in ('up', 'k'):
        return max(0, top - 1)
    if key in ('page_down', ' '):
        return top + body if more else top
    if key in ('page_up', 'b', 'backspace'):
        return max(0, top - body)
    if key == 'home':
        return 0
    return top


def run_pager(stdscr, text: str, settings: Settings, title: str = '') -> None:
    backend = Backend(stdscr, queue_size=settings.input_queue)
    backend.start()
    backend.register_style('status', settings.status_fg, settings.status_bg)
    top = 0
    try:
        while True:
            rows, cols = backend.screen_size()
            body = max(1, rows - 1)
            width = settings.width if settings.width is not None else cols
            lines = LinesIterator(text, width, break_words=settings.break_words)
            visible = list(islice(lines, top, top + body))
            more = next(lines, None) is not None
            backend.clear()
            backend.render_lines(text, visible)
            status = f" {title}  line {top + 1}  {'more' if more else 'end'}  q:quit"
            backend.print_at(rows - 1, 0, pad_to_width(status, max(0, cols - 1)), 'status')
            backend.refresh()
            new_top = next_top(top, backend.poll_event(), body, more)
            if new_top is None:
                return
            top = new_top
    finally:
        backend.stop()


def main(argv: Optional[List[str]] = None, env: Optional[MutableMapping[str, str]] = None,
         stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    try:
        args = apply_cli_args(argv, env)
        if args.mode == 'help':
            out.write(USAGE)
            return 0
        settings = Settings.from_env(env)
        configure_logging(settings, stream=err)
        path = args.paths[0] if args.paths else None
        if args.mode == 'tui' and path in (None, '-'):
            raise AppError('E004', 'cli.tui', 'the pager reads keys from the terminal; pass a FILE')
        text = read_input(path, stdin).expandtabs(settings.tab_size)
        width = settings.width if settings.width is not None else shutil.get_terminal_size().columns
        log.info("mode=%s width=%d chars=%d", args.mode, width, len(text))
        if args.mode == 'tui':
            curses.wrapper(run_pager, text, settings, path)
        elif args.mode == 'truncate':
            for line in text.splitlines():
                out.write(ellipsize(line, width) + '\n')
        else:
            for line in LinesIterator(text, width, break_words=settings.break_words):
                out.write(text[line.start:line.end] + '\n')
        return 0
    except AppError as e:
        log.error("%s", e)
        err.write(f"termwrap: {e}\n")
        return 2


__all__ = ["CliArgs", "USAGE", "apply_cli_args", "main", "next_top", "read_input", "run_pager"]
