"""配置文件"""

# 解析器参数
PARSER_CONFIG = {
    "variable_delimiter": "'",  # 变量占位符的定界字符，'x' 表示变量x
    "log_rpn": True,  # 转换完成后以debug级别记录RPN
}

# RPN求值参数
EVALUATOR_CONFIG = {
    "allow_partial": False,  # 求值结束后栈中剩余多个值时是否只取栈顶
    "suppress_fp_warnings": True,  # 屏蔽numpy的除零/溢出警告，结果保留inf/nan
}

# 运算优先级
PRECEDENCE_CONFIG = {
    "sentinel": 1,  # 左括号等
    "additive": 2,  # + -
    "multiplicative": 3,  # * / %
    "power": 4,  # ^
    "function": 5,  # 所有函数名
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    levels = [PRECEDENCE_CONFIG[key] for key in
              ("sentinel", "additive", "multiplicative", "power", "function")]
    assert levels == sorted(set(levels)), "优先级必须严格递增: sentinel < additive < multiplicative < power < function"
    assert len(PARSER_CONFIG["variable_delimiter"]) == 1, "变量定界符必须是单个字符"
    return True
