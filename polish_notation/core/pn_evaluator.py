"""Polish (prefix) notation evaluator"""
import logging

import numpy as np

from polish_notation.config.config import EVALUATOR_CONFIG
from polish_notation.core.errors import EmptyInput, UnexpectedEnd, TrailingTokens, ExpressionTooDeep
from polish_notation.core.token_system import TokenType, TOKEN_DEFINITIONS, classify_token, tokenize

logger = logging.getLogger(__name__)


def _resolve_max_depth(max_depth):
    if max_depth is None:
        max_depth = EVALUATOR_CONFIG['max_depth']
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        raise ValueError(f"max_depth must be a positive int, got {max_depth!r}")
    return max_depth


class PNEvaluator:
    """Evaluate prefix expressions with an explicit stack of pending operators"""

    @staticmethod
    def evaluate(expression, max_depth=None, operators=None):
        """
        Args:
            expression: prefix expression, tokens separated by whitespace
            max_depth: maximum number of nested pending operators
                       (EVALUATOR_CONFIG['max_depth'] when None)
            operators: operator table, symbol -> Token (built-ins when None)
        Returns:
            float
        Raises:
            PolishError subclass describing the first problem found, left to right
        """
        if not isinstance(expression, str):
            raise TypeError(f"expression must be str, got {type(expression).__name__}")
        max_depth = _resolve_max_depth(max_depth)
        table = TOKEN_DEFINITIONS if operators is None else operators

        tokens = tokenize(expression)
        if not tokens:
            logger.debug("Empty expression")
            raise EmptyInput()

        # each frame is (operator token, operands collected so far)
        frames = []
        cursor = 0
        while True:
            if cursor >= len(tokens):
                logger.debug(f"Ran out of tokens with {len(frames)} pending operator(s)")
                raise UnexpectedEnd()

            text = tokens[cursor]
            cursor += 1
            logger.debug(f"token: {text!r}")
            token = classify_token(text, table)

            if token.type == TokenType.OPERATOR:
                if len(frames) >= max_depth:
                    logger.debug(f"Nesting exceeds {max_depth} at token {cursor - 1}")
                    raise ExpressionTooDeep(max_depth)
                frames.append((token, []))
                continue

            # operand: feed upward through every frame it completes
            value = token.value
            while frames:
                op, args = frames[-1]
                args.append(value)
                if len(args) < op.arity:
                    break
                frames.pop()
                value = np.float64(op.func(*args))

            if not frames:
                if cursor < len(tokens):
                    logger.debug(f"{len(tokens) - cursor} token(s) left after a complete expression")
                    raise TrailingTokens(len(tokens) - cursor)
                return float(value)


def evaluate(expression, max_depth=None, operators=None):
    """Evaluate a Polish notation expression, e.g. evaluate("* + 1 2 3") == 9.0"""
    return PNEvaluator.evaluate(expression, max_depth=max_depth, operators=operators)
