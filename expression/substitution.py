"""expression/substitution.py - 把 'name' 形式的变量占位符替换为数值文本"""
import logging
from collections import namedtuple
from collections.abc import Mapping

import numpy as np

from config.config import PARSER_CONFIG
from core.errors import ErrorKind, Failure

logger = logging.getLogger(__name__)

Variable = namedtuple('Variable', ['name', 'value'])


def normalize_variables(variables):
    """接受 Variable 列表、(name, value) 二元组列表或 {name: value} 字典，统一成 Variable 列表"""
    if variables is None:
        return []
    if isinstance(variables, Mapping):
        variables = variables.items()
    return [Variable(name, value) for name, value in variables]


def placeholder(name):
    delimiter = PARSER_CONFIG["variable_delimiter"]
    return f"{delimiter}{name}{delimiter}"


def has_placeholder(expression, name):
    return placeholder(name) in expression


def format_value(value):
    """数值 -> 定点小数文本（不使用科学计数法，否则分类器会把 'e' 当成函数名）"""
    return np.format_float_positional(np.float64(value), trim='-')


def replace_placeholder(expression, name, value):
    """替换某个变量的全部出现；表达式中已经没有该占位符时原样返回"""
    quoted = placeholder(name)
    literal = format_value(value)
    while quoted in expression:
        expression = expression.replace(quoted, literal)
    return expression


def substitute(expression, variables):
    """
    按调用方给出的顺序逐个替换变量
    Args:
        expression: 含占位符的表达式
        variables: 见 normalize_variables
    Returns:
        替换后的新表达式；某个变量未在表达式中出现时返回 Failure(UNKNOWN_VARIABLE)
    """
    if not expression or expression.isspace():
        return Failure(ErrorKind.BAD_INIT)

    result = expression
    for var in normalize_variables(variables):
        # 先检查变量是否存在，再做替换
        if not has_placeholder(result, var.name):
            return Failure(ErrorKind.UNKNOWN_VARIABLE, var.name)

        count = result.count(placeholder(var.name))
        result = replace_placeholder(result, var.name, var.value)
        logger.debug(f"Substituted variable {var.name!r} ({count} occurrence(s))")

    return result
