"""core/operators.py"""
import numpy as np
import logging

logger = logging.getLogger(__name__)

TWO_PI = 2 * np.pi


class Operators:
    """所有运算符和函数的静态方法集合；操作数为 float64，遵循IEEE-754语义（除零得到inf/nan）"""

    @staticmethod
    def ensure_float(operand):
        """确保操作数是 float64"""
        return np.float64(operand)

    # 二元运算符========================================

    @staticmethod
    def add(operand1, operand2):
        return np.add(operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        return np.subtract(operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        return np.multiply(operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法，除数为0时得到 inf 或 nan 而不是抛异常"""
        return np.divide(operand1, operand2)

    @staticmethod
    def mod(operand1, operand2):
        """浮点取余，符号跟随被除数（fmod）"""
        return np.fmod(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        return np.power(operand1, operand2)

    # 一元函数====================

    @staticmethod
    def log(operand):
        """自然对数"""
        return np.log(operand)

    @staticmethod
    def log10(operand):
        return np.log10(operand)

    @staticmethod
    def sin(operand):
        return np.sin(operand)

    @staticmethod
    def cos(operand):
        return np.cos(operand)

    @staticmethod
    def tan(operand):
        return np.tan(operand)

    @staticmethod
    def cot(operand):
        """余切 = 1/tan"""
        return np.divide(1.0, np.tan(operand))

    @staticmethod
    def asin(operand):
        return np.arcsin(operand)

    @staticmethod
    def acos(operand):
        return np.arccos(operand)

    @staticmethod
    def atan(operand):
        return np.arctan(operand)

    @staticmethod
    def acot(operand):
        """反余切 = atan(1/x)"""
        return np.arctan(np.divide(1.0, operand))

    @staticmethod
    def deg(operand):
        """弧度转角度"""
        return (operand / TWO_PI) * 360

    @staticmethod
    def rad(operand):
        """角度转弧度"""
        return (operand / 360) * TWO_PI

    @staticmethod
    def sqrt(operand):
        return np.sqrt(operand)

    @staticmethod
    def exp(operand):
        return np.exp(operand)

    @staticmethod
    def abs(operand):
        """绝对值"""
        return np.abs(operand)


# 运算符字符 -> Operators 方法名
BINARY_METHODS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '%': 'mod',
    '^': 'pow',
}


def apply_binary(symbol, left, right):
    """计算 left OP right"""
    op_method = getattr(Operators, BINARY_METHODS[symbol])
    return op_method(Operators.ensure_float(left), Operators.ensure_float(right))


def apply_function(name, operand):
    """按小写函数名调用一元函数；Operators 中没有对应方法时返回 None"""
    op_method = getattr(Operators, name.lower(), None)
    if op_method is None:
        logger.debug(f"No implementation for function: {name}")
        return None
    return op_method(Operators.ensure_float(operand))
