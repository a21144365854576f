"""Terminal text layout: width-aware word wrapping over borrowed strings.

The layout core (`width`, `tokens`, `prefix`, `lines`, `truncate`) is pure and
has no terminal dependency; `backend` and `cli` are the curses-facing layers.
"""

from .lines import Line, LinesIterator, wrap
from .prefix import Prefix, prefix, simple_prefix, simple_suffix, suffix
from .tokens import Span, Token, tokenize
from .width import display_width, grapheme_width

__version__ = "0.3.0"

__all__ = [
    "Line",
    "LinesIterator",
    "Prefix",
    "Span",
    "Token",
    "display_width",
    "grapheme_width",
    "prefix",
    "simple_prefix",
    "simple_suffix",
    "suffix",
    "tokenize",
    "wrap",
]
