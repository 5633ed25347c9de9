import math
from concurrent.futures import ThreadPoolExecutor

import pytest
from calc.pipeline import evaluate_expression

@pytest.mark.parametrize("src,expected", [
    ("2+3*4", 14.0),
    ("2*3+4", 10.0),
    ("10-3-2", 5.0),
    ("2^3^2", 512.0),
    ("-3+4", 1.0),
    ("3- -4", 7.0),
    ("3+-4", -1.0),
    ("(2+3)*4", 20.0),
    ("-2^2", 4.0),
    ("2^-1", 0.5),
    ("+5", 5.0),
    ("7 % 3", 1.0),
    ("-5 % 3", 1.0),
    ("7 % -3", -2.0),
    ("max(1,2,3)", 3.0),
    ("max(1,-2)", 1.0),
    ("min(4, 2, 8)", 2.0),
    ("sum(1)", 1.0),
    ("sum(1,2,3,4)", 10.0),
    ("max(min(1,2), sum(1,2,3))", 6.0),
    ("sqrt(16)", 4.0),
    ("log2(8)", 3.0),
    ("ln(1)", 0.0),
    ("ceil(1.2)", 2.0),
    ("floor(-1.5)", -2.0),
    ("round(2.5)", 3.0),
    ("round(-2.5)", -3.0),
    ("round(2.4)", 2.0),
    ("round(0.49999999999999994)", 0.0),
    ("round(4503599627370497)", 4503599627370497.0),
    ("round(-0.5)", -1.0),
    ("0^0", 1.0),
    ("1e3 / 4", 250.0),
])
def test_values(src, expected):
    assert evaluate_expression(src) == expected

def test_trig():
    assert evaluate_expression("atan(1)*4") == pytest.approx(math.pi)
    assert evaluate_expression("sin(0) + cos(0)") == 1.0
    assert evaluate_expression("asin(1)") == pytest.approx(math.pi / 2)
    assert evaluate_expression("acos(1)") == 0.0
    assert evaluate_expression("tan(0)") == 0.0
    assert evaluate_expression("log10(1000)") == pytest.approx(3.0)

def test_result_is_plain_float():
    assert type(evaluate_expression("1+1")) is float

@pytest.mark.parametrize("src,check", [
    ("1/0", lambda x: x == math.inf),
    ("-1/0", lambda x: x == -math.inf),
    ("0/0", math.isnan),
    ("sqrt(-1)", math.isnan),
    ("ln(0)", lambda x: x == -math.inf),
    ("log10(-1)", math.isnan),
    ("(-8)^(1/3)", math.isnan),
    ("10^400", lambda x: x == math.inf),
    ("5 % 0", math.isnan),
    ("max(1, 0/0)", math.isnan),
])
def test_ieee_edge_cases_are_not_errors(src, check):
    assert check(evaluate_expression(src))

def test_repeat_runs_are_identical():
    src = "max(min(1,2), sum(1,2,3)) * 2^3^2 - 10 % 4"
    assert evaluate_expression(src) == evaluate_expression(src)

def test_concurrent_evaluations_share_nothing():
    exprs = [f"sum({i}, {i}, {i}) / 3" for i in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(evaluate_expression, exprs))
    assert results == [float(i) for i in range(50)]
