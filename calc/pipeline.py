import logging
from typing import List, Optional, Tuple

from .errors import CalcError
from .eval import evaluate
from .lexer import tokenize
from .shunting import convert
from .tokens import Token
from .trace import TraceFn, TraceRecorder, TraceStep

logger = logging.getLogger(__name__)


def to_rpn(src: str, *, max_depth: Optional[int] = None,
           trace: Optional[TraceFn] = None, max_output: Optional[int] = None) -> List[Token]:
    return convert(tokenize(src), max_depth=max_depth, trace=trace, end=len(src),
                   max_output=max_output)


def evaluate_expression(src: str, *, max_depth: Optional[int] = None,
                        trace: Optional[TraceFn] = None) -> float:
    """text -> tokens -> RPN -> float, with fresh stacks on every call."""
    try:
        rpn = to_rpn(src, max_depth=max_depth, trace=trace)
        return evaluate(rpn, max_depth=max_depth, trace=trace)
    except CalcError as e:
        logger.debug("rejected %r: %s", src, e)
        raise


def trace_expression(src: str, *, max_depth: Optional[int] = None) -> Tuple[float, List[TraceStep]]:
    rec = TraceRecorder()
    result = evaluate_expression(src, max_depth=max_depth, trace=rec)
    return result, rec.steps
