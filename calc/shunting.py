"""Infix token stream to RPN (shunting-yard) with per-call arity tracking."""
import logging
from typing import Iterable, List, Optional

from .config import max_output_length
from .errors import MismatchedParens, UnexpectedComma, UnexpectedToken
from .stack import BoundedStack
from .tokens import Comma, Function, LParen, Number, Operator, RParen, Token, render
from .trace import TraceFn, TraceStep, emit, render_tokens

logger = logging.getLogger(__name__)


class CallFrame:
    """Argument bookkeeping for one open function call."""
    __slots__ = ("commas", "has_args")

    def __init__(self):
        self.commas = 0
        self.has_args = False

    @property
    def arity(self) -> int:
        return self.commas + 1 if self.has_args else 0

    def __repr__(self):
        return str(self.arity)


def _ends_operand(tok) -> bool:
    return isinstance(tok, (Number, RParen))

def _starts_operand(tok) -> bool:
    return isinstance(tok, (Number, Function, LParen)) or (isinstance(tok, Operator) and tok.unary)


class ShuntingYard:
    def __init__(self, max_depth: Optional[int] = None, trace: Optional[TraceFn] = None,
                 max_output: Optional[int] = None):
        self.operators: BoundedStack[Token] = BoundedStack("operator", max_depth)
        self.output: BoundedStack[Token] = BoundedStack("output", max_output_length(max_output))
        self.calls: BoundedStack[CallFrame] = BoundedStack("arity", max_depth)
        self.trace = trace
        self._prev: Optional[Token] = None

    # ---- validation -------------------------------------------------
    def _check_adjacent(self, tok: Token):
        prev = self._prev
        if isinstance(prev, Function):
            if not isinstance(tok, LParen):
                raise UnexpectedToken(f"expected '(' after function '{prev.spec.name}'", tok.pos)
        elif _ends_operand(prev):
            if _starts_operand(tok):
                raise UnexpectedToken(f"missing operator before '{render(tok)}'", tok.pos)
        elif prev is not None:
            if isinstance(tok, RParen) and self._is_empty_call():
                return
            if not _starts_operand(tok):
                raise UnexpectedToken(f"expected an operand before '{render(tok)}'", tok.pos)
        elif isinstance(tok, Operator) and not tok.unary:
            raise UnexpectedToken(f"expression cannot start with '{render(tok)}'", tok.pos)

    def _is_empty_call(self) -> bool:
        return isinstance(self._prev, LParen) and isinstance(self.operators.below_top(), Function)

    # ---- dispatch ---------------------------------------------------
    def feed(self, tok: Token):
        self._check_adjacent(tok)
        if not isinstance(tok, (LParen, RParen)) and self.calls:
            self.calls.top().has_args = True

        if isinstance(tok, Number):
            self.output.push(tok, tok.pos)
        elif isinstance(tok, Operator):
            if not tok.unary:
                self._pop_weaker(tok)
            self.operators.push(tok, tok.pos)
        elif isinstance(tok, Function):
            self.operators.push(tok, tok.pos)
            self.calls.push(CallFrame(), tok.pos)
        elif isinstance(tok, LParen):
            self.operators.push(tok, tok.pos)
        elif isinstance(tok, RParen):
            self._close_paren(tok)
        elif isinstance(tok, Comma):
            self._comma(tok)
        else:
            raise TypeError(f"not a token: {tok!r}")

        self._prev = tok
        self._snapshot(render(tok))

    def _pop_weaker(self, tok: Operator):
        op1 = tok.spec
        while True:
            top = self.operators.top()
            if not isinstance(top, Operator):
                break
            op2 = top.spec
            if op1.left_assoc:
                move = op1.precedence <= op2.precedence
            else:
                move = op1.precedence < op2.precedence
            if not move:
                break
            self.output.push(self.operators.pop(), tok.pos)

    def _drain_to_lparen(self, pos: int) -> bool:
        while self.operators:
            if isinstance(self.operators.top(), LParen):
                return True
            self.output.push(self.operators.pop(), pos)
        return False

    def _close_paren(self, tok: RParen):
        if not self._drain_to_lparen(tok.pos):
            raise MismatchedParens("')' without matching '('", tok.pos)
        self.operators.pop()
        top = self.operators.top()
        if isinstance(top, Function):
            fn = self.operators.pop()
            fn.resolve(self.calls.pop().arity)
            self.output.push(fn, tok.pos)

    def _comma(self, tok: Comma):
        if not self._drain_to_lparen(tok.pos) or not isinstance(self.operators.below_top(), Function):
            raise UnexpectedComma("',' outside of a function call", tok.pos)
        self.calls.top().commas += 1

    def finish(self, end: int) -> List[Token]:
        if self._prev is None:
            raise UnexpectedToken("empty expression", end)
        if not _ends_operand(self._prev):
            unclosed = [t for t in self.operators if isinstance(t, LParen)]
            if unclosed:
                raise MismatchedParens("'(' is never closed", unclosed[-1].pos)
            raise UnexpectedToken(f"unexpected end of input after '{render(self._prev)}'", end)
        while self.operators:
            tok = self.operators.pop()
            if isinstance(tok, (LParen, RParen)):
                raise MismatchedParens("'(' is never closed", tok.pos)
            self.output.push(tok, end)
        self._snapshot("<end>")
        return list(self.output.snapshot())

    def _snapshot(self, token: str):
        step = TraceStep(
            stage="convert",
            token=token,
            operators=render_tokens(self.operators),
            output=render_tokens(self.output),
            arity=tuple(repr(c) for c in self.calls),
        )
        logger.debug("%s\toperators [%s] output [%s]", token,
                     " ".join(step.operators), " ".join(step.output))
        emit(self.trace, step)


def convert(tokens: Iterable[Token], *, max_depth: Optional[int] = None,
            trace: Optional[TraceFn] = None, end: int = 0,
            max_output: Optional[int] = None) -> List[Token]:
    """Reorder an infix token stream into RPN.

    ``end`` is the input length, reported as the position of errors found at
    end of input.
    """
    sy = ShuntingYard(max_depth, trace, max_output)
    for tok in tokens:
        sy.feed(tok)
    return sy.finish(end)
