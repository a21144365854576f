from __future__ import annotations

"""
Greedy line packer.

`LinesIterator(text, width)` yields `Line` spans one at a time. Each line takes
as many whole tokens as fit into `width` columns. A token wider than the whole
line is cut at grapheme boundaries (or, with ``break_words=False``, placed
alone). A single cluster that is wider than the line is placed alone as well,
so every call makes progress, whatever the width.

    >>> s = "abra a"
    >>> [s[l.start:l.end] for l in LinesIterator(s, 5)]
    ['abra', 'a']
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Optional

import grapheme

from .error_codes import check_text, check_width
from .prefix import Prefix, fits, simple_prefix
from .tokens import Span, Token, tokenize
from .width import grapheme_width


log = logging.getLogger("termwrap.lines")


@dataclass(frozen=True)
class Line(Span):
    width: int = 0
    # content wider than the budget was placed alone on this line
    forced: bool = False


class LinesIterator:
    """Single-pass iterator of line spans over a borrowed string.

    Exhaustion is final; wrap the same text again with a new iterator.
    """

    def __init__(self, text: str, width: int, *, break_words: bool = True):
        self.text = check_text(text, "lines")
        self.width = check_width(width, "lines")
        self.break_words = break_words
        self._tokens: Iterator[Token] = tokenize(text)
        # token (or token remainder) that did not fit on the previous line
        self._carry: Optional[Token] = None
        # offsets of blank lines still to be emitted
        self._blank: Deque[int] = deque()
        self._done = False

    def __iter__(self) -> "LinesIterator":
        return self

    def __next__(self) -> Line:
        if self._blank:
            pos = self._blank.popleft()
            return Line(pos, pos, 0)
        token = self._take()
        if token is None:
            raise StopIteration
        if not fits(0, token.width, self.width):
            return self._overlong(token)
        start = token.start
        used = token.width
        last = token
        while last.separated and not last.hard_break:
            nxt = next(self._tokens)
            if not fits(used, last.gap + nxt.width, self.width):
                self._carry = nxt
                break
            used += last.gap + nxt.width
            last = nxt
        else:
            self._queue_blanks(last)
        return Line(start, last.end, used)

    def _take(self) -> Optional[Token]:
        if self._carry is not None:
            token, self._carry = self._carry, None
            return token
        if self._done:
            return None
        token = next(self._tokens, None)
        if token is None:
            self._done = True
        return token

    def _queue_blanks(self, token: Token) -> None:
        # every line break after the first one opens an empty line
        for pos in token.breaks[:-1]:
            self._blank.append(pos + 1)

    def _overlong(self, token: Token) -> Line:
        content = self.text[token.start:token.end]
        if self.break_words:
            head = simple_prefix(content, self.width)
            forced = head.length == 0
            if forced:
                cluster = next(grapheme.graphemes(content))
                head = Prefix(len(cluster), grapheme_width(cluster))
            if head.length < len(token):
                self._carry = Token(
                    token.start + head.length,
                    token.end,
                    token.width - head.width,
                    token.separated,
                    token.gap,
                    token.breaks,
                )
                if forced:
                    log.debug("cluster at %d wider than %d columns placed alone", token.start, self.width)
                return Line(token.start, token.start + head.length, head.width, forced)
        log.debug("token at %d (%d columns) exceeds width %d", token.start, token.width, self.width)
        self._queue_blanks(token)
        return Line(token.start, token.end, token.width, True)


def wrap(text: str, width: int, *, break_words: bool = True) -> List[str]:
    """Wrap `text` into display lines no wider than `width` columns."""
    return [text[line.start:line.end] for line in LinesIterator(text, width, break_words=break_words)]


__all__ = ["Line", "LinesIterator", "wrap"]
