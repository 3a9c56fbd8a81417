"""Core module - token system, operators and the prefix evaluator"""
from .errors import (
    ErrorKind, PolishError, EmptyInput, UnexpectedEnd, InvalidToken,
    DivisionByZero, TrailingTokens, ExpressionTooDeep
)
from .operators import Operators, OPERATOR_FUNCTIONS
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, define_operator,
    extend_operators, classify_token, parse_number, tokenize
)
from .pn_evaluator import PNEvaluator, evaluate

__all__ = [
    'ErrorKind', 'PolishError', 'EmptyInput', 'UnexpectedEnd', 'InvalidToken',
    'DivisionByZero', 'TrailingTokens', 'ExpressionTooDeep',
    'Operators', 'OPERATOR_FUNCTIONS',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'define_operator',
    'extend_operators', 'classify_token', 'parse_number', 'tokenize',
    'PNEvaluator', 'evaluate'
]
