import numpy as np
from ..registry import register, VARIADIC

@register("max", arity=VARIADIC, doc="max(x1, ..., xn): largest argument, NaN if any is NaN")
def max_fn(*xs):
    return np.max(np.asarray(xs, dtype=float))

@register("min", arity=VARIADIC, doc="min(x1, ..., xn): smallest argument, NaN if any is NaN")
def min_fn(*xs):
    return np.min(np.asarray(xs, dtype=float))

@register("sum", arity=VARIADIC, doc="sum(x1, ..., xn)")
def sum_fn(*xs):
    return np.sum(np.asarray(xs, dtype=float))
