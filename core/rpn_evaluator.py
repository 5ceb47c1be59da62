"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import ErrorKind, Failure
from core.operators import apply_binary, apply_function
from core.token_system import is_number_token, is_operator_token, lookup_function

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, allow_partial=None):
        """
        在数值栈上评估RPN表达式
        Args:
            token_sequence: RPN token列表（或空格分隔的RPN文本）
            allow_partial: 结束时栈中有多个值是否允许（取栈顶）；None 表示使用配置
        Returns:
            float 结果；失败时返回 Failure
        """
        if isinstance(token_sequence, str):
            token_sequence = token_sequence.split()
        if not token_sequence:
            return Failure(ErrorKind.BAD_RPN)
        if allow_partial is None:
            allow_partial = EVALUATOR_CONFIG["allow_partial"]

        if EVALUATOR_CONFIG["suppress_fp_warnings"]:
            with np.errstate(all='ignore'):
                return RPNEvaluator._run(token_sequence, allow_partial)
        return RPNEvaluator._run(token_sequence, allow_partial)

    @staticmethod
    def _run(token_sequence, allow_partial):
        stack = []

        for token in token_sequence:
            # ================== 数字 ==================
            if is_number_token(token):
                stack.append(np.float64(token))
                continue

            # ================== 二元运算符 ==================
            if is_operator_token(token):
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token}")
                    return Failure(ErrorKind.SYNTAX_ERROR, token)
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(apply_binary(token, operand1, operand2))
                continue

            # ================== 函数 ==================
            func = lookup_function(token)
            if func is None:
                logger.debug(f"Unknown token: {token}")
                return Failure(ErrorKind.SYNTAX_ERROR, token)

            if not func.implemented:
                return Failure(ErrorKind.UNSUPPORTED_FUNCTION, func.name)

            if len(stack) < 1:
                logger.debug(f"Insufficient operands for {token}")
                return Failure(ErrorKind.SYNTAX_ERROR, token)
            operand = stack.pop()
            stack.append(apply_function(func.name, operand))

        # 返回结果处理
        if len(stack) > 1:
            if not allow_partial:
                logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
                return Failure(ErrorKind.SYNTAX_ERROR, f"{len(stack)} values left on stack")
            logger.warning(f"Partial expression with {len(stack)} stack elements, returning top of stack")
        return float(stack[-1])
