from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List

from calc.config import validate_config
from calc.errors import CalcError
from calc.eval import evaluate
from calc.pipeline import to_rpn, trace_expression
from calc.registry import list_functions, list_operators
from calc.trace import finite_or_str, format_rpn, steps_to_frame
from engine.batch import evaluate_many

validate_config()

app = FastAPI(title="Shunting-yard calculator")

class ExprBody(BaseModel):
    expr: str

class BatchBody(BaseModel):
    exprs: List[str] = []


def _reject(e: CalcError):
    raise HTTPException(status_code=400, detail=e.to_dict())


@app.get("/functions")
def functions():
    return {"functions": list_functions()}

@app.get("/operators")
def operators():
    return {"operators": list_operators()}

@app.post("/rpn")
def rpn(body: ExprBody):
    try:
        tokens = to_rpn(body.expr)
    except CalcError as e:
        _reject(e)
    return {"ok": True, "rpn": format_rpn(tokens)}

@app.post("/evaluate")
def evaluate_api(body: ExprBody):
    try:
        tokens = to_rpn(body.expr)
        result = evaluate(tokens)
    except CalcError as e:
        _reject(e)
    return {"rpn": format_rpn(tokens), "result": finite_or_str(result)}

@app.post("/trace")
def trace(body: ExprBody):
    try:
        result, steps = trace_expression(body.expr)
    except CalcError as e:
        _reject(e)
    frame = steps_to_frame(steps)
    return {"result": finite_or_str(result), "steps": frame.to_dict(orient="records")}

@app.post("/evaluate_batch")
def evaluate_batch(body: BatchBody):
    out = evaluate_many(body.exprs)
    return {
        "results": [
            {"expr": src, "result": finite_or_str(r.result), "rpn": r.rpn,
             "error": r.error, "message": r.message}
            for src, r in zip(body.exprs, out.itertuples(index=False))
        ]
    }
