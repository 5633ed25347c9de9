from typing import Any, Dict, Optional


class CalcError(ValueError):
    """Base for every rejected expression."""
    kind = "CalcError"

    def __init__(self, message: str, pos: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self):
        if self.pos is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind} at {self.pos}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "pos": self.pos}


class LexError(CalcError):
    kind = "LexError"

class MismatchedParens(CalcError):
    kind = "MismatchedParens"

class UnexpectedComma(CalcError):
    kind = "UnexpectedComma"

class UnexpectedToken(CalcError):
    kind = "UnexpectedToken"

class ArityMismatch(CalcError):
    kind = "ArityMismatch"

class StackOverflow(CalcError):
    kind = "StackOverflow"

class MalformedProgram(CalcError):
    kind = "MalformedProgram"
