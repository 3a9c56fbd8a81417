"""Configuration"""
import logging

logger = logging.getLogger(__name__)

# Evaluator
EVALUATOR_CONFIG = {
    "max_depth": 1000,  # nested pending operators before ExpressionTooDeep
}

# Batch evaluation
BATCH_CONFIG = {
    "cache_size": 1000,  # LRU entries kept by BatchEvaluator
    "result_columns": ["expression", "value", "error", "message"],
}


def validate_config():
    """Check the configuration for consistency"""
    max_depth = EVALUATOR_CONFIG["max_depth"]
    # bool is an int subclass
    assert not isinstance(max_depth, bool) and isinstance(max_depth, int) and max_depth >= 1, \
        "max_depth must be a positive int"
    cache_size = BATCH_CONFIG["cache_size"]
    assert not isinstance(cache_size, bool) and isinstance(cache_size, int) and cache_size >= 0, \
        "cache_size must be a non-negative int"
    assert BATCH_CONFIG["result_columns"][0] == "expression", "first result column must be the expression"
    logger.info("Configuration validated successfully!")
