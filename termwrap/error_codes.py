from __future__ import annotations

"""
Error codes with human-readable messages.

Output format: "Error [<CODE>]: <short title>. Stage: <stage>. Detail: <detail>"

Usage:
- raise AppError('E001', 'lines.width', 'width=-1')
- msg = format_error('E003', 'cli.read', "invalid start byte at 7")
"""

from dataclasses import dataclass
from typing import Optional


ERROR_TITLES: dict[str, str] = {
    'E001': 'Negative column width',
    'E002': 'Invalid argument type',
    'E003': 'Input is not valid UTF-8',
    'E004': 'Cannot read input',
    'E005': 'Invalid color',
    'E006': 'Invalid configuration value',
}


def format_error(code: str, stage: str, detail: Optional[str] = None) -> str:
    title = ERROR_TITLES.get(code, 'Unknown error')
    stage = (stage or '').strip() or '-'
    detail = (detail or '').strip()
    base = f"Error [{code}]: {title}. Stage: {stage}."
    if detail:
        return f"{base} Detail: {detail}"
    return base


@dataclass
class AppError(Exception):
    code: str
    stage: str
    detail: Optional[str] = None

    def __str__(self) -> str:
        return format_error(self.code, self.stage, self.detail)


def check_width(width: int, stage: str) -> int:
    """Validate a column budget at the API boundary."""
    if isinstance(width, bool) or not isinstance(width, int):
        raise AppError('E002', stage, f"width must be int, got {type(width).__name__}")
    if width < 0:
        raise AppError('E001', stage, f"width={width}")
    return width


def check_text(text: str, stage: str) -> str:
    if not isinstance(text, str):
        raise AppError('E002', stage, f"text must be str, got {type(text).__name__}")
    return text


__all__ = ["AppError", "ERROR_TITLES", "format_error", "check_width", "check_text"]
