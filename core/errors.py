"""core/errors.py - 错误类型

各阶段（替换、转换、求值）不直接抛异常，而是返回 Failure；
MathExprParser 在对外接口处把 Failure 转成对应的异常类。
"""
from enum import Enum


class ErrorKind(Enum):
    BAD_INIT = "bad_init"  # 表达式为空或全是空白
    UNKNOWN_VARIABLE = "unknown_variable"  # 变量占位符不在表达式中
    UNCLOSED_RIGHT_PARENTHESIS = "unclosed_right_parenthesis"
    UNCLOSED_LEFT_PARENTHESIS = "unclosed_left_parenthesis"
    BAD_RPN = "bad_rpn"  # 转换结果为空
    SYNTAX_ERROR = "syntax_error"  # 求值时操作数不足或无法识别的token
    UNSUPPORTED_FUNCTION = "unsupported_function"  # 已声明但未实现的函数（atan2）


class ExpressionError(ValueError):
    """所有表达式错误的基类"""
    kind = None
    default_message = "invalid expression"

    def __init__(self, detail=None):
        self.detail = detail
        message = self.default_message if detail is None else f"{self.default_message}: {detail}"
        super().__init__(message)


class BadInitError(ExpressionError):
    kind = ErrorKind.BAD_INIT
    default_message = "expression is empty"


class UnknownVariableError(ExpressionError):
    kind = ErrorKind.UNKNOWN_VARIABLE
    default_message = "unknown variable"

    @property
    def name(self):
        return self.detail


class UnclosedRightParenthesisError(ExpressionError):
    kind = ErrorKind.UNCLOSED_RIGHT_PARENTHESIS
    default_message = "unclosed right parenthesis"


class UnclosedLeftParenthesisError(ExpressionError):
    kind = ErrorKind.UNCLOSED_LEFT_PARENTHESIS
    default_message = "unclosed left parenthesis"


class BadRpnError(ExpressionError):
    kind = ErrorKind.BAD_RPN
    default_message = "empty RPN sequence"


class InputExprSyntaxError(ExpressionError):
    kind = ErrorKind.SYNTAX_ERROR
    default_message = "syntax error"


class UnsupportedFunctionError(ExpressionError):
    kind = ErrorKind.UNSUPPORTED_FUNCTION
    default_message = "function is not implemented"


EXCEPTION_BY_KIND = {
    cls.kind: cls for cls in (
        BadInitError, UnknownVariableError, UnclosedRightParenthesisError,
        UnclosedLeftParenthesisError, BadRpnError, InputExprSyntaxError,
        UnsupportedFunctionError,
    )
}


class Failure:
    """阶段失败结果：kind + 出错的上下文（变量名、token等）"""

    __slots__ = ('kind', 'detail')

    def __init__(self, kind, detail=None):
        self.kind = kind
        self.detail = detail

    def __repr__(self):
        return f"Failure({self.kind.name}, {self.detail!r})"

    def __eq__(self, other):
        return isinstance(other, Failure) and (self.kind, self.detail) == (other.kind, other.detail)

    def __hash__(self):
        return hash((self.kind, self.detail))

    def to_exception(self):
        return EXCEPTION_BY_KIND[self.kind](self.detail)


def is_failure(result):
    return isinstance(result, Failure)
