"""core/token_system.py"""
import re
from enum import Enum

from config.config import PARSER_CONFIG, PRECEDENCE_CONFIG


class TokenType(Enum):
    OPERATOR = "operator"  # 二元运算符 + - * / % ^
    FUNCTION = "function"  # 函数名


class CharClass(Enum):
    """单个字符的分类结果"""
    OPERATOR = "operator"
    NUMBER = "number"  # 数字、小数点、负号
    LPAREN = "lparen"
    RPAREN = "rparen"
    QUOTE = "quote"  # 变量定界符，转换时跳过
    NAME = "name"  # 其余字符都算作函数名的一部分


class Token:
    def __init__(self, token_type, name, arity=0, precedence=None, implemented=True):
        self.type = token_type
        self.name = name
        self.arity = arity
        self.precedence = precedence
        self.implemented = implemented

    def __repr__(self):
        return f"Token({self.type.value}, {self.name!r}, arity={self.arity})"


_ADD = PRECEDENCE_CONFIG["additive"]
_MUL = PRECEDENCE_CONFIG["multiplicative"]
_POW = PRECEDENCE_CONFIG["power"]
_FUNC = PRECEDENCE_CONFIG["function"]

# Token定义字典，函数名统一小写
TOKEN_DEFINITIONS = {
    # 二元运算符
    '+': Token(TokenType.OPERATOR, '+', arity=2, precedence=_ADD),
    '-': Token(TokenType.OPERATOR, '-', arity=2, precedence=_ADD),
    '*': Token(TokenType.OPERATOR, '*', arity=2, precedence=_MUL),
    '/': Token(TokenType.OPERATOR, '/', arity=2, precedence=_MUL),
    '%': Token(TokenType.OPERATOR, '%', arity=2, precedence=_MUL),
    '^': Token(TokenType.OPERATOR, '^', arity=2, precedence=_POW),

    # 一元函数
    'log': Token(TokenType.FUNCTION, 'log', arity=1, precedence=_FUNC),
    'log10': Token(TokenType.FUNCTION, 'log10', arity=1, precedence=_FUNC),
    'sin': Token(TokenType.FUNCTION, 'sin', arity=1, precedence=_FUNC),
    'cos': Token(TokenType.FUNCTION, 'cos', arity=1, precedence=_FUNC),
    'tan': Token(TokenType.FUNCTION, 'tan', arity=1, precedence=_FUNC),
    'cot': Token(TokenType.FUNCTION, 'cot', arity=1, precedence=_FUNC),
    'asin': Token(TokenType.FUNCTION, 'asin', arity=1, precedence=_FUNC),
    'acos': Token(TokenType.FUNCTION, 'acos', arity=1, precedence=_FUNC),
    'atan': Token(TokenType.FUNCTION, 'atan', arity=1, precedence=_FUNC),
    'acot': Token(TokenType.FUNCTION, 'acot', arity=1, precedence=_FUNC),
    'deg': Token(TokenType.FUNCTION, 'deg', arity=1, precedence=_FUNC),
    'rad': Token(TokenType.FUNCTION, 'rad', arity=1, precedence=_FUNC),
    'sqrt': Token(TokenType.FUNCTION, 'sqrt', arity=1, precedence=_FUNC),
    'exp': Token(TokenType.FUNCTION, 'exp', arity=1, precedence=_FUNC),
    'abs': Token(TokenType.FUNCTION, 'abs', arity=1, precedence=_FUNC),

    # 双参数反正切：只声明，没有实现
    'atan2': Token(TokenType.FUNCTION, 'atan2', arity=2, precedence=_FUNC, implemented=False),
}

OPERATOR_CHARS = frozenset(name for name, tk in TOKEN_DEFINITIONS.items()
                           if tk.type == TokenType.OPERATOR)
FUNCTION_NAMES = frozenset(name for name, tk in TOKEN_DEFINITIONS.items()
                           if tk.type == TokenType.FUNCTION)

NUMBER_PATTERN = re.compile(r'-?(?:\d+\.?\d*|\.\d+)')
_NUMBER_CHARS = frozenset('0123456789.')


def strip_whitespace(text):
    """去掉表达式中所有空白字符"""
    return ''.join(text.split())


def classify(text):
    """
    从左到右一次扫描，给每个字符打上 CharClass 标签
    '-' 在以下三种情况下是数字的负号而不是运算符：
        1. 表达式的第一个字符
        2. 紧跟在 '(' 之后
        3. 紧跟在另一个运算符之后（包括 '-'）
    Args:
        text: 已去除空白的表达式
    Returns:
        与 text 等长的 CharClass 列表
    """
    delimiter = PARSER_CONFIG["variable_delimiter"]
    tags = []
    for i, ch in enumerate(text):
        if ch == '-':
            if i == 0 or text[i - 1] == '(' or tags[i - 1] == CharClass.OPERATOR:
                tags.append(CharClass.NUMBER)
            else:
                tags.append(CharClass.OPERATOR)
        elif ch in OPERATOR_CHARS:
            tags.append(CharClass.OPERATOR)
        elif ch in _NUMBER_CHARS:
            tags.append(CharClass.NUMBER)
        elif ch == '(':
            tags.append(CharClass.LPAREN)
        elif ch == ')':
            tags.append(CharClass.RPAREN)
        elif ch == delimiter:
            tags.append(CharClass.QUOTE)
        else:
            tags.append(CharClass.NAME)
    return tags


def is_number_token(token):
    return NUMBER_PATTERN.fullmatch(token) is not None


def is_operator_token(token):
    return token in OPERATOR_CHARS


def lookup_function(token):
    """大小写不敏感地查找函数，找不到返回None"""
    tk = TOKEN_DEFINITIONS.get(token.lower())
    if tk is not None and tk.type == TokenType.FUNCTION:
        return tk
    return None


def precedence(token):
    """运算符/函数的优先级；'(' 和未知名称返回最低的哨兵优先级"""
    if is_operator_token(token):
        return TOKEN_DEFINITIONS[token].precedence
    if lookup_function(token) is not None:
        return PRECEDENCE_CONFIG["function"]
    return PRECEDENCE_CONFIG["sentinel"]
