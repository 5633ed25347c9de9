"""Calculator limits"""
import os


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


LIMITS = {
    "max_stack_depth": _env_int("CALC_MAX_STACK_DEPTH", 256),      # nesting stacks
    "max_output_length": _env_int("CALC_MAX_OUTPUT_LENGTH", 4096),  # RPN sequence
    "max_name_length": 15,  # longest function name the lexer keeps
}


def max_stack_depth(override=None):
    if override is not None:
        return int(override)
    return LIMITS["max_stack_depth"]


def max_output_length(override=None):
    if override is not None:
        return int(override)
    return LIMITS["max_output_length"]


def validate_config():
    """Sanity-check the limits before serving."""
    assert LIMITS["max_stack_depth"] > 0, "max_stack_depth must be positive"
    assert LIMITS["max_output_length"] > 0, "max_output_length must be positive"
    assert LIMITS["max_name_length"] > 0, "max_name_length must be positive"
