"""表达式模块 - 变量替换、解析器和批量求值"""
from .substitution import Variable, substitute, replace_placeholder, has_placeholder
from .parser import MathExprParser, evaluate
from .batch import evaluate_frame

__all__ = [
    'Variable', 'substitute', 'replace_placeholder', 'has_placeholder',
    'MathExprParser', 'evaluate', 'evaluate_frame'
]
