import numpy as np
from ..registry import register

def _unary(name, ufunc, doc):
    register(name, arity=1, doc=doc)(lambda x: ufunc(x))

_unary("sqrt",  np.sqrt,    "square root; NaN below zero")
_unary("log10", np.log10,   "base-10 logarithm")
_unary("log2",  np.log2,    "base-2 logarithm")
_unary("ln",    np.log,     "natural logarithm")
_unary("sin",   np.sin,     "sine (radians)")
_unary("asin",  np.arcsin,  "inverse sine")
_unary("cos",   np.cos,     "cosine (radians)")
_unary("acos",  np.arccos,  "inverse cosine")
_unary("tan",   np.tan,     "tangent (radians)")
_unary("atan",  np.arctan,  "inverse tangent")
_unary("ceil",  np.ceil,    "smallest integer >= x")
_unary("floor", np.floor,   "largest integer <= x")

@register("round", arity=1, doc="nearest integer, halves away from zero")
def round_fn(x):
    # np.round rounds halves to even
    t = np.trunc(x)
    if np.abs(x - t) >= 0.5:
        return t + np.copysign(1.0, x)
    return t
