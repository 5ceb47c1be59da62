"""核心模块 - Token系统、RPN转换器、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, CharClass, TOKEN_DEFINITIONS, classify,
    strip_whitespace, lookup_function, precedence
)
from .errors import (
    ErrorKind, Failure, ExpressionError, BadInitError, UnknownVariableError,
    UnclosedRightParenthesisError, UnclosedLeftParenthesisError, BadRpnError,
    InputExprSyntaxError, UnsupportedFunctionError
)
from .rpn_converter import to_rpn, rpn_to_string
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'CharClass', 'TOKEN_DEFINITIONS', 'classify',
    'strip_whitespace', 'lookup_function', 'precedence',
    'ErrorKind', 'Failure', 'ExpressionError', 'BadInitError', 'UnknownVariableError',
    'UnclosedRightParenthesisError', 'UnclosedLeftParenthesisError', 'BadRpnError',
    'InputExprSyntaxError', 'UnsupportedFunctionError',
    'to_rpn', 'rpn_to_string', 'RPNEvaluator', 'Operators'
]
