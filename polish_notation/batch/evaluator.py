import logging
from collections import OrderedDict
from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd

from polish_notation.config.config import BATCH_CONFIG
from polish_notation.core import PNEvaluator, PolishError, EmptyInput

logger = logging.getLogger(__name__)


class EvaluationResult:
    """Value of one expression, or the error that stopped it"""

    def __init__(self, expression, value=None, error=None):
        self.expression = expression
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def copy(self):
        return EvaluationResult(self.expression, value=self.value, error=self.error)

    def to_record(self):
        return {
            'expression': self.expression,
            'value': self.value if self.ok else np.nan,
            'error': None if self.ok else self.error.kind.name,
            'message': None if self.ok else str(self.error),
        }

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult({self.expression!r}, value={self.value!r})"
        return f"EvaluationResult({self.expression!r}, error={str(self.error)!r})"


def evaluate_result(expression: str, max_depth: Optional[int] = None,
                    operators=None) -> EvaluationResult:
    """Like `evaluate`, but a PolishError is returned inside the result instead of raised"""
    try:
        value = PNEvaluator.evaluate(expression, max_depth=max_depth, operators=operators)
    except PolishError as e:
        logger.debug(f"Error evaluating '{expression[:50]}': {e}")
        return EvaluationResult(expression, error=e)
    return EvaluationResult(expression, value=value)


def _is_missing(expression):
    return not isinstance(expression, str) and pd.api.types.is_scalar(expression) and pd.isna(expression)


class BatchEvaluator:

    def __init__(self, cache_size=None, max_depth=None, operators=None):
        self.cache_size = BATCH_CONFIG['cache_size'] if cache_size is None else cache_size
        self.max_depth = max_depth
        self.operators = operators
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """Drop the oldest entries beyond cache_size"""
        while len(self._result_cache) > self.cache_size:
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_stats(self):
        return {'hits': self._cache_hits, 'misses': self._cache_misses, 'size': len(self._result_cache)}

    def evaluate(self, expression: str) -> EvaluationResult:
        """
        Args:
            expression: prefix expression
        Returns:
            EvaluationResult, served from the cache when the same text was seen before
        """
        if _is_missing(expression):
            # None/NaN cells of a Series count as empty input
            return EvaluationResult(expression, error=EmptyInput())

        if expression in self._result_cache:
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}...")
            return self._result_cache[expression].copy()

        self._cache_misses += 1
        result = evaluate_result(expression, max_depth=self.max_depth, operators=self.operators)
        if self.cache_size > 0:
            self._result_cache[expression] = result.copy()
            self._manage_cache()
        return result

    def evaluate_many(self, expressions: Union[pd.Series, Iterable[str]]) -> pd.DataFrame:
        """
        Evaluate every expression; errors become rows rather than exceptions.
        Args:
            expressions: Series (its index is kept) or any iterable of strings;
                         None/NaN entries become EMPTY_INPUT rows, other non-str values raise TypeError
        Returns:
            DataFrame with columns expression, value (NaN on error), error (ErrorKind name), message
        """
        index = expressions.index if isinstance(expressions, pd.Series) else None
        records = [self.evaluate(expr).to_record() for expr in expressions]

        # object columns keep None as None instead of inferring a string dtype with NaN
        columns = {}
        for name in BATCH_CONFIG['result_columns']:
            dtype = np.float64 if name == 'value' else object
            columns[name] = pd.Series([record[name] for record in records], dtype=dtype)
        df = pd.DataFrame(columns)
        if index is not None:
            df.index = index

        failed = df['error'].notna().sum()
        if failed:
            logger.debug(f"{failed} of {len(df)} expressions failed")
        return df


def evaluate_many(expressions, max_depth=None, operators=None):
    """Evaluate a batch of expressions without keeping a cache around"""
    return BatchEvaluator(cache_size=0, max_depth=max_depth, operators=operators).evaluate_many(expressions)
