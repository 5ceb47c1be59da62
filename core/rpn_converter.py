"""中缀表达式 -> RPN（调度场算法）"""
import logging

from config.config import PARSER_CONFIG
from core.errors import ErrorKind, Failure
from core.token_system import CharClass, classify, precedence, strip_whitespace

logger = logging.getLogger(__name__)


def to_rpn(expression):
    """
    把中缀表达式转换为RPN token列表
    运算符入栈前，弹出栈顶所有优先级 >= 当前运算符的项（因此 ^ 也是左结合）
    函数名压栈，优先级高于所有运算符
    Args:
        expression: 中缀表达式（可以含空白）
    Returns:
        token列表；失败时返回 Failure
    """
    if not expression or expression.isspace():
        return Failure(ErrorKind.BAD_INIT)

    text = strip_whitespace(expression)
    tags = classify(text)

    operator_stack = []
    output = []

    i = 0
    n = len(text)
    while i < n:
        tag = tags[i]

        if tag == CharClass.QUOTE:
            # 残留的变量定界符直接跳过
            i += 1

        elif tag == CharClass.OPERATOR:
            op = text[i]
            while operator_stack and precedence(operator_stack[-1]) >= precedence(op):
                output.append(operator_stack.pop())
            operator_stack.append(op)
            i += 1

        elif tag == CharClass.LPAREN:
            operator_stack.append('(')
            i += 1

        elif tag == CharClass.RPAREN:
            while operator_stack and operator_stack[-1] != '(':
                output.append(operator_stack.pop())
            if not operator_stack:
                return Failure(ErrorKind.UNCLOSED_RIGHT_PARENTHESIS, text[:i + 1])
            operator_stack.pop()  # 丢弃 '('
            i += 1

        elif tag == CharClass.NUMBER:
            start = i
            while i < n and tags[i] == CharClass.NUMBER:
                i += 1
            output.append(text[start:i])

        else:
            # 函数名：一直读到下一个 '('
            start = i
            while i < n and text[i] != '(':
                i += 1
            operator_stack.append(text[start:i])

    while operator_stack:
        output.append(operator_stack.pop())

    # 开头的未闭合 '(' 会出现在RPN末尾
    if output and output[-1] == '(':
        return Failure(ErrorKind.UNCLOSED_LEFT_PARENTHESIS, text)

    # 其余未闭合的 '(' 出现在其后的运算符/函数之前
    for pos, token in enumerate(output):
        if token == '(':
            context = output[pos + 1] if pos + 1 < len(output) else None
            return Failure(ErrorKind.UNCLOSED_LEFT_PARENTHESIS, context)

    if PARSER_CONFIG["log_rpn"]:
        logger.debug(f"RPN for {text!r}: {rpn_to_string(output)!r}")
    return output


def rpn_to_string(tokens):
    """RPN token列表 -> 空格分隔的文本"""
    return ' '.join(tokens)
