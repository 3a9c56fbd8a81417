"""core/errors.py"""
from enum import Enum


class ErrorKind(Enum):
    EMPTY_INPUT = "empty input"
    UNEXPECTED_END = "unexpected end of input"
    INVALID_TOKEN = "invalid token"
    DIVISION_BY_ZERO = "division by zero"
    TRAILING_TOKENS = "trailing tokens"
    EXPRESSION_TOO_DEEP = "expression too deep"
    FAILED_CALCULATION = "failed calculation"


class PolishError(Exception):
    """
    Base class for evaluation errors. Match on `kind`, not on the text.
    Custom operators may raise it directly; the optional detail is appended
    to the message as "<kind text>: <detail>".
    """
    kind = ErrorKind.FAILED_CALCULATION

    def __init__(self, detail=None):
        super().__init__(*(() if detail is None else (detail,)))
        self.detail = detail

    def __str__(self):
        if self.detail is None:
            return self.kind.value
        return f"{self.kind.value}: {self.detail}"


class EmptyInput(PolishError):
    """Input is empty or only whitespace."""
    kind = ErrorKind.EMPTY_INPUT


class UnexpectedEnd(PolishError):
    """Tokens ran out while an operand was still expected."""
    kind = ErrorKind.UNEXPECTED_END


class InvalidToken(PolishError):
    """Token is neither a known operator nor a decimal literal."""
    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, token):
        super().__init__(token)
        self.token = token


class DivisionByZero(PolishError):
    kind = ErrorKind.DIVISION_BY_ZERO


class TrailingTokens(PolishError):
    """A complete expression was read but tokens remain."""
    kind = ErrorKind.TRAILING_TOKENS

    def __init__(self, remaining=0):
        super().__init__()
        self.remaining = remaining


class ExpressionTooDeep(PolishError):
    kind = ErrorKind.EXPRESSION_TOO_DEEP

    def __init__(self, limit):
        super().__init__()
        self.limit = limit
