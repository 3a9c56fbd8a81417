"""core/token_system.py"""
import re
from enum import Enum

import numpy as np

from polish_notation.core.errors import InvalidToken
from polish_notation.core.operators import OPERATOR_FUNCTIONS

# optional sign, digits with optional fraction (or a bare fraction), optional exponent
NUMBER_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


class TokenType(Enum):
    OPERAND = "operand"
    OPERATOR = "operator"


class Token:
    def __init__(self, token_type, name, value=None, arity=0, func=None):
        self.type = token_type
        self.name = name
        self.value = value
        self.arity = arity
        self.func = func

    def __repr__(self):
        if self.type == TokenType.OPERAND:
            return f"Token(operand, {self.value!r})"
        return f"Token(operator, {self.name!r}, arity={self.arity})"


def define_operator(symbol, func, arity=2):
    """
    Build an operator Token.
    Args:
        symbol: text the operator is written as
        func: callable taking `arity` float64 operands
        arity: number of operands, at least 1
    Returns:
        Token of type OPERATOR
    """
    if not isinstance(symbol, str) or not symbol or any(ch.isspace() for ch in symbol):
        raise ValueError(f"Operator symbol must be a non-empty word without whitespace: {symbol!r}")
    if NUMBER_PATTERN.fullmatch(symbol):
        raise ValueError(f"Operator symbol would be read as a number: {symbol!r}")
    if not callable(func):
        raise ValueError(f"Operator {symbol!r} needs a callable")
    if not isinstance(arity, int) or arity < 1:
        raise ValueError(f"Operator {symbol!r} needs arity >= 1, got {arity!r}")
    return Token(TokenType.OPERATOR, symbol, arity=arity, func=func)


# Built-in operators, all binary
TOKEN_DEFINITIONS = {
    symbol: define_operator(symbol, func, arity=2)
    for symbol, func in OPERATOR_FUNCTIONS.items()
}


def extend_operators(*tokens, base=None):
    """Return a new operator table: `base` (built-ins by default) plus `tokens`"""
    table = dict(TOKEN_DEFINITIONS if base is None else base)
    for token in tokens:
        if token.type != TokenType.OPERATOR:
            raise ValueError(f"Not an operator token: {token!r}")
        table[token.name] = token
    return table


def parse_number(text):
    """Parse a decimal literal into float64, or None if `text` is not one"""
    if NUMBER_PATTERN.fullmatch(text) is None:
        return None
    return np.float64(float(text))


def classify_token(text, operators=None):
    """Operator lookup first, then decimal literal; anything else is InvalidToken"""
    table = TOKEN_DEFINITIONS if operators is None else operators
    token = table.get(text)
    if token is not None:
        return token

    value = parse_number(text)
    if value is None:
        raise InvalidToken(text)
    return Token(TokenType.OPERAND, text, value=value)


def tokenize(expression):
    """Whitespace-delimited fragments of `expression`, empties dropped"""
    return expression.split()
