"""Batch evaluation module"""
from .evaluator import EvaluationResult, BatchEvaluator, evaluate_result, evaluate_many

__all__ = ['EvaluationResult', 'BatchEvaluator', 'evaluate_result', 'evaluate_many']
