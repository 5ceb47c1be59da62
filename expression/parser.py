import logging

from core.errors import BadInitError, is_failure
from core.rpn_converter import to_rpn, rpn_to_string
from core.rpn_evaluator import RPNEvaluator
from expression.substitution import substitute

logger = logging.getLogger(__name__)


class MathExprParser:
    """
    数学表达式解析器：变量替换 -> RPN转换 -> RPN求值
    表达式文本在整个生命周期内不会被修改，每次 calculate 都从原始文本开始，
    因此同一个实例可以被多个线程共享
    """

    def __init__(self, expression: str, allow_partial=None):
        if not isinstance(expression, str) or not expression.strip():
            raise BadInitError(repr(expression))
        self.expression = expression
        self.allow_partial = allow_partial
        self.last_rpn = None  # 最近一次转换得到的RPN文本，仅供查看

    def __repr__(self):
        return f"MathExprParser({self.expression!r})"

    def _rpn_tokens(self, variables):
        """替换变量并转换为RPN token列表，失败时直接抛出对应异常"""
        substituted = substitute(self.expression, variables)
        if is_failure(substituted):
            raise substituted.to_exception()

        tokens = to_rpn(substituted)
        if is_failure(tokens):
            raise tokens.to_exception()

        self.last_rpn = rpn_to_string(tokens)
        return tokens

    def to_rpn(self, variables=()) -> str:
        """
        Args:
            variables: (name, value) 列表或 {name: value} 字典
        Returns:
            空格分隔的RPN文本
        """
        return rpn_to_string(self._rpn_tokens(variables))

    def calculate(self, variables=()) -> float:
        """
        Args:
            variables: (name, value) 列表或 {name: value} 字典，按给出顺序替换
        Returns:
            表达式的值
        Raises:
            ExpressionError 的各个子类
        """
        tokens = self._rpn_tokens(variables)

        result = RPNEvaluator.evaluate(tokens, allow_partial=self.allow_partial)
        if is_failure(result):
            logger.debug(f"Evaluation of {self.expression!r} failed: {result}")
            raise result.to_exception()
        return result


def evaluate(expression, variables=()):
    """一次性求值的便捷函数"""
    return MathExprParser(expression).calculate(variables)
