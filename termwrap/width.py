from __future__ import annotations

"""
Display-width oracle: how many terminal cells a grapheme cluster occupies.

Widths come from `wcwidth`; clusters come from `grapheme`. A cluster is
measured once, so a base character and its combining marks count as one cell.
"""

import functools
import unicodedata
from typing import Iterator, Tuple

import grapheme
import wcwidth


_ZERO_WIDTH = {
    "\u200b",  # ZERO WIDTH SPACE
    "\u200c",  # ZERO WIDTH NON-JOINER
    "\u200d",  # ZERO WIDTH JOINER
    "\u200e",  # LEFT-TO-RIGHT MARK
    "\u200f",  # RIGHT-TO-LEFT MARK
    "\ufeff",  # ZERO WIDTH NO-BREAK SPACE (BOM)
    "\ufe0e",  # VARIATION SELECTOR-15
    "\ufe0f",  # VARIATION SELECTOR-16
}

_VS16 = "\ufe0f"
_ZWJ = "\u200d"


def _is_zero_width(ch: str) -> bool:
    if ch in _ZERO_WIDTH:
        return True
    # Cf includes many format/zero-width chars
    return unicodedata.category(ch) == "Cf" or bool(unicodedata.combining(ch))


def _is_emoji_part(ch: str) -> bool:
    cp = ord(ch)
    return (
        ch == _VS16
        or ch == _ZWJ
        or 0x1F3FB <= cp <= 0x1F3FF  # skin tone modifiers
        or 0x1F1E6 <= cp <= 0x1F1FF  # regional indicators
    )


@functools.lru_cache(maxsize=4096)
def _codepoint_width(ch: str) -> int:
    if _is_zero_width(ch):
        return 0
    w = wcwidth.wcwidth(ch)
    # -1 means a control character
    if w < 0:
        return 0
    return min(int(w), 2)


@functools.lru_cache(maxsize=4096)
def grapheme_width(cluster: str) -> int:
    """Return the column count (0, 1 or 2) of a single grapheme cluster."""
    base = 0
    for ch in cluster:
        base = _codepoint_width(ch)
        if base:
            break
    if base == 1 and len(cluster) > 1 and any(_is_emoji_part(ch) for ch in cluster[1:]):
        return 2
    return base


def display_width(text: str) -> int:
    """Sum of cluster widths of `text`."""
    return sum(grapheme_width(g) for g in grapheme.graphemes(text or ""))


def iter_clusters(text: str) -> Iterator[Tuple[int, str, int]]:
    """Yield (offset, cluster, width) for every grapheme cluster of `text`."""
    offset = 0
    for cluster in grapheme.graphemes(text or ""):
        yield offset, cluster, grapheme_width(cluster)
        offset += len(cluster)


__all__ = ["grapheme_width", "display_width", "iter_clusters"]
