import logging
from typing import Iterable, Optional

import numpy as np

from .errors import ArityMismatch, MalformedProgram
from .stack import BoundedStack
from .tokens import Function, Number, Operator, Token, render
from .trace import TraceFn, TraceStep, emit, format_value

logger = logging.getLogger(__name__)


def _pop_args(values: BoundedStack, n: int):
    if len(values) < n:
        raise MalformedProgram(f"needs {n} operand(s), value stack holds {len(values)}")
    args = [None] * n
    for i in range(n - 1, -1, -1):  # last pushed is the last parameter
        args[i] = values.pop()
    return args


def apply_operator(tok: Operator, values: BoundedStack):
    if tok.unary:
        (rhs,) = _pop_args(values, 1)
        return tok.spec.impl(rhs)
    lhs, rhs = _pop_args(values, 2)
    return tok.spec.impl(lhs, rhs)


def apply_function(tok: Function, values: BoundedStack):
    spec = tok.spec
    if tok.arity is None:
        raise MalformedProgram(f"call to '{spec.name}' has no resolved arity", tok.pos)
    if not spec.accepts(tok.arity):
        expected = "at least 1" if spec.variadic else str(spec.arity)
        raise ArityMismatch(f"{spec.name} expects {expected} argument(s), got {tok.arity}", tok.pos)
    args = _pop_args(values, tok.arity)
    return spec.impl(*args)


def evaluate(rpn: Iterable[Token], *, max_depth: Optional[int] = None,
             trace: Optional[TraceFn] = None) -> float:
    """Replay an RPN sequence and return the single remaining value.

    Floating-point edge cases (x/0, sqrt(-1), overflow) are not errors: they
    come back as inf or nan.
    """
    values: BoundedStack[np.float64] = BoundedStack("value", max_depth)
    with np.errstate(all="ignore"):
        for tok in rpn:
            if isinstance(tok, Number):
                out = np.float64(tok.value)
            elif isinstance(tok, Operator):
                out = np.float64(apply_operator(tok, values))
            elif isinstance(tok, Function):
                out = np.float64(apply_function(tok, values))
            else:
                raise MalformedProgram(f"unexpected '{render(tok)}' in RPN", getattr(tok, "pos", None))
            values.push(out, tok.pos)

            step = TraceStep(stage="evaluate", token=render(tok),
                             values=tuple(format_value(v) for v in values))
            logger.debug("> %s => [%s]", step.token, " ".join(step.values))
            emit(trace, step)

    if len(values) != 1:
        raise MalformedProgram(f"expected exactly one result, value stack holds {len(values)}")
    return float(values.pop())
