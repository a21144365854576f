from __future__ import annotations

"""
Runtime settings read from the environment.

  TERMWRAP_WIDTH         column budget (default: terminal width)
  TERMWRAP_BREAK_WORDS   cut words longer than a line (default on)
  TERMWRAP_TAB_SIZE      tab stop used when expanding input (default 8)
  TERMWRAP_INPUT_QUEUE   pending key events kept by the pager (default 64)
  TERMWRAP_STATUS_FG     pager status bar text color (default black)
  TERMWRAP_STATUS_BG     pager status bar background (default cyan)
  LOG_LEVEL              DEBUG|INFO|WARNING|ERROR (default WARNING)
  TERMWRAP_LOG_FILE      rotating log file
  LOG_JSON               JSON-formatted logs
  TERMWRAP_LOG_STDERR    also log to stderr
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .colors import BaseColor, Color, Dark, parse_color
from .error_codes import AppError


def env_flag(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(env: Mapping[str, str], name: str, default: Optional[int], minimum: int) -> Optional[int]:
    raw = str(env.get(name) or '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise AppError('E006', f'config.{name}', f'not an integer: {raw!r}') from None
    if value < minimum:
        raise AppError('E006', f'config.{name}', f'must be >= {minimum}, got {value}')
    return value


@dataclass
class Settings:
    width: Optional[int] = None
    break_words: bool = True
    tab_size: int = 8
    input_queue: int = 64
    status_fg: Color = field(default_factory=lambda: Dark(BaseColor.BLACK))
    status_bg: Color = field(default_factory=lambda: Dark(BaseColor.CYAN))
    log_level: str = 'WARNING'
    log_file: Optional[str] = None
    log_json: bool = False
    log_stderr: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        level = str(env.get('LOG_LEVEL') or 'WARNING').strip().upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR'):
            raise AppError('E006', 'config.LOG_LEVEL', repr(level))
        return cls(
            width=_env_int(env, 'TERMWRAP_WIDTH', None, 0),
            break_words=env_flag(env.get('TERMWRAP_BREAK_WORDS'), True),
            tab_size=_env_int(env, 'TERMWRAP_TAB_SIZE', 8, 1),
            input_queue=_env_int(env, 'TERMWRAP_INPUT_QUEUE', 64, 1),
            status_fg=parse_color(env.get('TERMWRAP_STATUS_FG') or 'black'),
            status_bg=parse_color(env.get('TERMWRAP_STATUS_BG') or 'cyan'),
            log_level=level,
            log_file=(str(env.get('TERMWRAP_LOG_FILE') or '').strip() or None),
            log_json=env_flag(env.get('LOG_JSON')),
            log_stderr=env_flag(env.get('TERMWRAP_LOG_STDERR')),
        )


__all__ = ["Settings", "env_flag"]
