"""Configuration module"""
from .config import EVALUATOR_CONFIG, BATCH_CONFIG, validate_config

__all__ = ['EVALUATOR_CONFIG', 'BATCH_CONFIG', 'validate_config']
