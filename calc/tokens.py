from dataclasses import dataclass, field
from typing import Optional, Union

from .errors import MalformedProgram
from .registry import FuncSpec, OpSpec


@dataclass(frozen=True)
class Number:
    value: float
    pos: int = 0

@dataclass(frozen=True)
class Operator:
    spec: OpSpec
    pos: int = 0

    @property
    def unary(self) -> bool:
        return self.spec.unary

@dataclass(eq=False)
class Function:
    spec: FuncSpec
    pos: int = 0
    arity: Optional[int] = field(default=None)

    def resolve(self, arity: int):
        """Attach the call-site argument count; only the closing paren does this."""
        if self.arity is not None:
            raise MalformedProgram(f"arity of '{self.spec.name}' already resolved", self.pos)
        self.arity = arity

@dataclass(frozen=True)
class LParen:
    pos: int = 0

@dataclass(frozen=True)
class RParen:
    pos: int = 0

@dataclass(frozen=True)
class Comma:
    pos: int = 0


Token = Union[Number, Operator, Function, LParen, RParen, Comma]


def render(tok: Token) -> str:
    if isinstance(tok, Number):
        return "%.17g" % tok.value
    if isinstance(tok, Operator):
        return ("@" if tok.unary else "") + tok.spec.symbol
    if isinstance(tok, Function):
        if tok.arity is None:
            return tok.spec.name
        return f"{tok.spec.name}/{tok.arity}"
    if isinstance(tok, LParen):
        return "("
    if isinstance(tok, RParen):
        return ")"
    if isinstance(tok, Comma):
        return ","
    raise TypeError(f"not a token: {tok!r}")
