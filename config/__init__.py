"""配置模块"""
from .config import PARSER_CONFIG, EVALUATOR_CONFIG, PRECEDENCE_CONFIG, validate_config

__all__ = ['PARSER_CONFIG', 'EVALUATOR_CONFIG', 'PRECEDENCE_CONFIG', 'validate_config']
