"""Polish (prefix) notation arithmetic evaluator"""
from .core import (
    evaluate, PNEvaluator, ErrorKind, PolishError, EmptyInput, UnexpectedEnd,
    InvalidToken, DivisionByZero, TrailingTokens, ExpressionTooDeep,
    TOKEN_DEFINITIONS, define_operator, extend_operators
)
from .batch import EvaluationResult, BatchEvaluator, evaluate_result, evaluate_many

__all__ = [
    'evaluate', 'PNEvaluator', 'ErrorKind', 'PolishError', 'EmptyInput', 'UnexpectedEnd',
    'InvalidToken', 'DivisionByZero', 'TrailingTokens', 'ExpressionTooDeep',
    'TOKEN_DEFINITIONS', 'define_operator', 'extend_operators',
    'EvaluationResult', 'BatchEvaluator', 'evaluate_result', 'evaluate_many'
]
