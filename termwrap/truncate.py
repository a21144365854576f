from __future__ import annotations

"""
Width-aware truncation helpers shared by the CLI and the renderer.
"""

from .prefix import prefix, simple_prefix, simple_suffix
from .width import display_width


def truncate_to_width(s: str, width: int) -> str:
    """Trim string so its display width is <= width (Unicode-aware)."""
    if width <= 0:
        return ""
    s = s or ""
    return s[:simple_prefix(s, width).length]


def right_truncate_to_width(s: str, width: int) -> str:
    """Keep the rightmost part of string that fits into width (Unicode-aware)."""
    if width <= 0:
        return ""
    s = s or ""
    keep = simple_suffix(s, width).length
    return s[len(s) - keep:]


def pad_to_width(s: str, width: int) -> str:
    """Fit `s` into exactly `width` cells: keep whole clusters, fill the rest with spaces.

    A wide char that would straddle the edge is dropped and its cell padded.
    """
    if width <= 0:
        return ""
    s = s or ""
    head = simple_prefix(s, width)
    return s[:head.length] + " " * (width - head.width)


def ellipsize(s: str, width: int, ellipsis: str = "…") -> str:
    """Shorten `s` to `width` cells, cutting at a word boundary when possible.

    - If the string fits, return as-is.
    - Otherwise keep the longest run of whole words that leaves room for the
      ellipsis; if not even the first word fits, cut inside it.
    - If the ellipsis alone does not fit, hard trim the ellipsis.
    """
    s = s or ""
    if width <= 0:
        return ""
    if display_width(s) <= width:
        return s
    room = width - display_width(ellipsis)
    if room <= 0:
        return truncate_to_width(ellipsis, width)
    keep = prefix(s.split(" "), room, " ").length
    if keep == 0:
        keep = simple_prefix(s, room).length
    return s[:keep].rstrip() + ellipsis


__all__ = [
    "truncate_to_width",
    "right_truncate_to_width",
    "pad_to_width",
    "ellipsize",
]
