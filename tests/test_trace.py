from calc.pipeline import trace_expression
from calc.trace import TraceRecorder, steps_to_frame
from calc.pipeline import to_rpn

def test_trace_snapshots_for_call():
    result, steps = trace_expression("max(1,2)")
    assert result == 2.0
    convert = [s for s in steps if s.stage == "convert"]
    evaluate = [s for s in steps if s.stage == "evaluate"]
    assert [s.token for s in convert] == ["max", "(", "1", ",", "2", ")", "<end>"]
    assert convert[0].operators == ("max",)
    assert convert[0].arity == ("0",)
    assert convert[2].arity == ("1",)
    assert convert[3].arity == ("2",)
    assert convert[5].output == ("1", "2", "max/2")
    assert convert[5].operators == () and convert[5].arity == ()
    assert [s.values for s in evaluate] == [("1",), ("1", "2"), ("2",)]

def test_nested_arity_depth():
    _, steps = trace_expression("max(min(1,2), sum(1,2,3))")
    assert max(len(s.arity) for s in steps) == 2

def test_recorder_collects_conversion_steps():
    rec = TraceRecorder()
    to_rpn("1+2", trace=rec)
    assert [s.token for s in rec.steps] == ["1", "+", "2", "<end>"]
    assert rec.steps[-1].output == ("1", "2", "+")

def test_frame():
    _, steps = trace_expression("-1/0")
    frame = steps_to_frame(steps)
    assert list(frame.columns) == ["stage", "token", "operators", "output", "arity", "values"]
    assert len(frame) == len(steps)
    assert frame.iloc[-1]["values"] == "-inf"
