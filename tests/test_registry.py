import pytest
from calc.registry import OPERATORS, VARIADIC, find_operator, get_fn, list_functions, lookup_function, register
from calc.config import validate_config
import calc.functions  # noqa

def test_operator_lookup_by_symbol_and_kind():
    assert find_operator("-", True).precedence == 4
    assert find_operator("-", False).precedence == 1
    assert find_operator("^", False).left_assoc is False
    assert find_operator("*", True) is None
    assert find_operator("&", False) is None

def test_one_entry_per_symbol_and_kind():
    keys = [(op.symbol, op.unary) for op in OPERATORS]
    assert len(keys) == len(set(keys))

def test_catalog_contents():
    names = [f["name"] for f in list_functions()]
    assert names == sorted(["max", "min", "sum", "sqrt", "log10", "log2", "ln", "sin", "asin",
                            "cos", "acos", "tan", "atan", "ceil", "floor", "round"])
    assert get_fn("sum").arity == VARIADIC
    assert get_fn("floor").arity == 1
    assert lookup_function("Max") is None
    with pytest.raises(KeyError):
        get_fn("nope")

def test_variadic_needs_one_argument():
    spec = get_fn("min")
    assert not spec.accepts(0)
    assert spec.accepts(1) and spec.accepts(20)
    assert get_fn("sqrt").accepts(1) and not get_fn("sqrt").accepts(2)

def test_register_rejects_long_names():
    with pytest.raises(ValueError):
        register("a" * 16, arity=1)

def test_config_is_valid():
    validate_config()

def test_bad_env_limit_names_the_variable(monkeypatch):
    from calc.config import _env_int
    monkeypatch.setenv("CALC_MAX_STACK_DEPTH", "lots")
    with pytest.raises(ValueError, match="CALC_MAX_STACK_DEPTH"):
        _env_int("CALC_MAX_STACK_DEPTH", 256)
    monkeypatch.setenv("CALC_MAX_STACK_DEPTH", "32")
    assert _env_int("CALC_MAX_STACK_DEPTH", 256) == 32
