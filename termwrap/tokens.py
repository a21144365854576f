from __future__ import annotations

"""
Word tokenizer over a borrowed string.

Tokens are maximal runs of non-whitespace grapheme clusters. Each token is a
span into the source text plus its display width and what separates it from
the next token. Nothing is copied: callers slice the text with the span.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .width import iter_clusters


# Whitespace that must not become a break opportunity
_NO_BREAK = {"\xa0", "\u2007", "\u202f"}

# Characters that str.splitlines() treats as line boundaries
_LINE_BREAKS = {"\n", "\r", "\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"}


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


@dataclass(frozen=True)
class Token(Span):
    width: int = 0
    # another token follows after a whitespace run
    separated: bool = False
    # display width of that whitespace run
    gap: int = 0
    # offsets of the line-break characters inside that run (mandatory breaks)
    breaks: Tuple[int, ...] = ()

    @property
    def hard_break(self) -> bool:
        return bool(self.breaks)


def is_separator(cluster: str) -> bool:
    """True for clusters that delimit tokens."""
    return cluster.isspace() and not any(ch in _NO_BREAK for ch in cluster)


def tokenize(text: str) -> Iterator[Token]:
    """Lazily split `text` into tokens at runs of whitespace.

    Leading and trailing whitespace is dropped: the last token is never
    `separated`, and line breaks after it are not recorded.
    """
    start: Optional[int] = None
    width = 0
    # (start, end, width) of a finished token waiting to learn what follows it
    pending: Optional[Tuple[int, int, int]] = None
    gap = 0
    breaks: List[int] = []
    end = 0
    for offset, cluster, w in iter_clusters(text):
        end = offset + len(cluster)
        if is_separator(cluster):
            if start is not None:
                pending = (start, offset, width)
                start = None
                gap = 0
                breaks = []
            if pending is not None:
                gap += w
                # "\r\n" is one cluster and one break
                if any(ch in _LINE_BREAKS for ch in cluster):
                    breaks.append(end - 1)
            continue
        if start is None:
            if pending is not None:
                yield Token(pending[0], pending[1], pending[2], True, gap, tuple(breaks))
                pending = None
            start = offset
            width = 0
        width += w
    if start is not None:
        yield Token(start, end, width)
    elif pending is not None:
        yield Token(pending[0], pending[1], pending[2])


__all__ = ["Span", "Token", "tokenize", "is_separator"]
