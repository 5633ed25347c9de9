from typing import Callable, Dict, List, NamedTuple, Optional, Union

import numpy as np

from .config import LIMITS

VARIADIC = -1  # at least one argument


class OpSpec(NamedTuple):
    symbol: str
    precedence: int
    left_assoc: bool
    unary: bool
    impl: Callable


class FuncSpec(NamedTuple):
    name: str
    arity: int      # fixed count, or VARIADIC
    impl: Callable
    doc: str

    @property
    def variadic(self) -> bool:
        return self.arity == VARIADIC

    def accepts(self, argc: int) -> bool:
        if self.variadic:
            return argc >= 1
        return argc == self.arity


OPERATORS: List[OpSpec] = [
    OpSpec('+', 1, True,  False, lambda a, b: a + b),
    OpSpec('-', 1, True,  False, lambda a, b: a - b),
    OpSpec('*', 2, True,  False, lambda a, b: a * b),
    OpSpec('/', 2, True,  False, lambda a, b: a / b),
    OpSpec('%', 2, True,  False, lambda a, b: np.mod(a, b)),
    OpSpec('^', 3, False, False, lambda a, b: np.power(a, b)),
    OpSpec('+', 4, False, True,  lambda a: +a),
    OpSpec('-', 4, False, True,  lambda a: -a),
]


def _check_operators(ops):
    seen = set()
    for op in ops:
        key = (op.symbol, op.unary)
        if key in seen:
            raise ValueError(f"duplicate {'unary' if op.unary else 'binary'} operator '{op.symbol}'")
        seen.add(key)

_check_operators(OPERATORS)


def find_operator(symbol: str, unary: bool) -> Optional[OpSpec]:
    for op in OPERATORS:
        if op.symbol == symbol and op.unary == unary:
            return op
    return None


REGISTRY: Dict[str, FuncSpec] = {}

def register(name: str, arity: int, doc: str = ""):
    if len(name) > LIMITS["max_name_length"]:
        raise ValueError(f"function name '{name}' exceeds {LIMITS['max_name_length']} characters")
    if arity != VARIADIC and arity < 0:
        raise ValueError(f"invalid arity {arity} for '{name}'")

    def deco(fn):
        REGISTRY[name] = FuncSpec(name, arity, fn, doc)
        return fn
    return deco

def lookup_function(name: str) -> Optional[FuncSpec]:
    return REGISTRY.get(name)

def get_fn(name: str) -> FuncSpec:
    if name not in REGISTRY:
        raise KeyError(f"Unknown function '{name}'")
    return REGISTRY[name]

def list_functions():
    out = []
    for k, spec in sorted(REGISTRY.items()):
        arity: Union[int, str] = "variadic" if spec.variadic else spec.arity
        out.append({"name": k, "arity": arity, "doc": spec.doc})
    return out

def list_operators():
    return [
        {"symbol": op.symbol, "precedence": op.precedence,
         "assoc": "left" if op.left_assoc else "right",
         "kind": "unary" if op.unary else "binary"}
        for op in OPERATORS
    ]
