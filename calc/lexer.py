import re
from typing import Iterator, Optional, Tuple

from .config import LIMITS
from .errors import LexError
from .registry import find_operator, lookup_function
from .tokens import Comma, Function, LParen, Number, Operator, RParen, Token
from . import functions  # noqa: F401  (registers the function catalog)

NUMBER = re.compile(r"[0-9]+(\.[0-9]*)?([eE][+-]?[0-9]+)?")
NAME = re.compile(r"[A-Za-z][A-Za-z0-9]*")

_PUNCT = {"(": LParen, ")": RParen, ",": Comma}


def _unary_context(previous: Optional[Token]) -> bool:
    # only the immediately preceding token decides
    return previous is None or isinstance(previous, (Operator, LParen, Comma))


def next_token(src: str, pos: int, previous: Optional[Token]) -> Optional[Tuple[Token, int]]:
    """Lex one token starting at ``pos``.

    Returns ``(token, new_pos)``, or ``None`` once only whitespace is left.
    ``previous`` is the last token produced for this input (``None`` at the
    start) and decides whether ``+``/``-`` are unary or binary.
    """
    n = len(src)
    while pos < n and src[pos].isspace():
        pos += 1
    if pos >= n:
        return None

    ch = src[pos]

    m = NUMBER.match(src, pos)
    if m:
        return Number(float(m.group(0)), pos), m.end()

    m = NAME.match(src, pos)
    if m:
        name = m.group(0)[:LIMITS["max_name_length"]]
        spec = lookup_function(name)
        if spec is None:
            raise LexError(f'undefined function "{name}"', pos)
        return Function(spec, pos), m.end()

    if ch in _PUNCT:
        return _PUNCT[ch](pos), pos + 1

    unary = _unary_context(previous)
    op = find_operator(ch, unary)
    if op is None:
        if unary and find_operator(ch, False) is not None:
            raise LexError(f"operator '{ch}' is missing its left operand", pos)
        raise LexError(f'invalid token at "{src[pos:]}"', pos)
    return Operator(op, pos), pos + 1


def tokenize(src: str) -> Iterator[Token]:
    pos, previous = 0, None
    while True:
        step = next_token(src, pos, previous)
        if step is None:
            return
        previous, pos = step
        yield previous
