from dataclasses import asdict, dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from .tokens import Token, render

@dataclass(frozen=True)
class TraceStep:
    stage: str                      # "convert" | "evaluate"
    token: str
    operators: Tuple[str, ...] = ()
    output: Tuple[str, ...] = ()
    arity: Tuple[str, ...] = ()
    values: Tuple[str, ...] = ()

TraceFn = Callable[[TraceStep], None]


def format_value(v) -> str:
    return "%.17g" % float(v)

def format_rpn(tokens: Iterable[Token]) -> str:
    return " ".join(render(t) for t in tokens)

def render_tokens(tokens: Iterable[Token]) -> Tuple[str, ...]:
    return tuple(render(t) for t in tokens)


@dataclass
class TraceRecorder:
    """Callable collector for the ``trace=`` hook of convert/evaluate."""
    steps: List[TraceStep] = field(default_factory=list)

    def __call__(self, step: TraceStep):
        self.steps.append(step)

    def frame(self) -> pd.DataFrame:
        return steps_to_frame(self.steps)


def steps_to_frame(steps: Iterable[TraceStep]) -> pd.DataFrame:
    rows = []
    for s in steps:
        row = asdict(s)
        for k in ("operators", "output", "arity", "values"):
            row[k] = " ".join(row[k])
        rows.append(row)
    return pd.DataFrame(rows, columns=["stage", "token", "operators", "output", "arity", "values"])

def emit(trace: Optional[TraceFn], step: TraceStep):
    if trace is not None:
        trace(step)

def finite_or_str(x: float):
    """JSON has no inf/nan; render those as strings."""
    if np.isfinite(x):
        return float(x)
    if np.isnan(x):
        return "nan"
    return "inf" if x > 0 else "-inf"
