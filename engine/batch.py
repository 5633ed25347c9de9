import numpy as np
import pandas as pd
from typing import Iterable, Union

from calc.errors import CalcError
from calc.eval import evaluate
from calc.pipeline import to_rpn
from calc.trace import format_rpn

def evaluate_many(exprs: Union[pd.Series, Iterable[str]]) -> pd.DataFrame:
    """
    Evaluate a column of formulas; one row per input, aligned to its index.
    A rejected formula gets result NaN plus its error kind and message.
    """
    if not isinstance(exprs, pd.Series):
        exprs = pd.Series(list(exprs), dtype=object)
    rows = []
    for src in exprs:
        row = {"result": np.nan, "rpn": None, "error": None, "message": None}
        try:
            rpn = to_rpn(str(src))
            row["rpn"] = format_rpn(rpn)
            row["result"] = evaluate(rpn)
        except CalcError as e:
            row["error"], row["message"] = e.kind, e.message
        rows.append(row)
    return pd.DataFrame(rows, index=exprs.index, columns=["result", "rpn", "error", "message"])
