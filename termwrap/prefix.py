from __future__ import annotations

"""
Width-bounded prefix calculation.

`prefix` answers: how many characters of the separator-joined token sequence
fit into `width` columns when breaking only between tokens. `simple_prefix`
answers the same per grapheme cluster. Both never split a token or cluster.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

import grapheme

from .error_codes import check_text, check_width
from .width import display_width, grapheme_width, iter_clusters


@dataclass(frozen=True)
class Prefix:
    # characters of the source taken by the prefix
    length: int
    # display columns of the prefix
    width: int


def fits(used: int, extra: int, budget: int) -> bool:
    """Acceptance rule shared by every packer: exact fit is accepted."""
    return used + extra <= budget


def prefix(tokens: Iterable[str], width: int, separator: str = " ") -> Prefix:
    """Longest prefix of `separator.join(tokens)` that fits in `width` columns.

    Tokens are consumed lazily and only until the first one that overflows.
    If even the first token does not fit, the result is empty.
    """
    check_width(width, "prefix")
    sep_len = len(separator)
    sep_width = display_width(separator)
    length = 0
    used = 0
    first = True
    for token in tokens:
        extra = display_width(token)
        if not first:
            extra += sep_width
        if not fits(used, extra, width):
            break
        used += extra
        length += len(token) if first else sep_len + len(token)
        first = False
    return Prefix(length, used)


def suffix(tokens: Sequence[str], width: int, separator: str = " ") -> Prefix:
    """Longest suffix of `separator.join(tokens)` that fits in `width` columns."""
    return prefix(reversed(tokens), width, separator)


def simple_prefix(text: str, width: int) -> Prefix:
    """Longest run of whole grapheme clusters from the start of `text`."""
    check_text(text, "simple_prefix")
    check_width(width, "simple_prefix")
    used = 0
    for offset, cluster, w in iter_clusters(text):
        if not fits(used, w, width):
            return Prefix(offset, used)
        used += w
    return Prefix(len(text), used)


def simple_suffix(text: str, width: int) -> Prefix:
    """Longest run of whole grapheme clusters from the end of `text`."""
    check_text(text, "simple_suffix")
    check_width(width, "simple_suffix")
    used = 0
    length = 0
    for cluster in reversed(list(grapheme.graphemes(text))):
        w = grapheme_width(cluster)
        if not fits(used, w, width):
            break
        used += w
        length += len(cluster)
    return Prefix(length, used)


__all__ = ["Prefix", "fits", "prefix", "suffix", "simple_prefix", "simple_suffix"]
