"""expression/batch.py - 对 DataFrame 的每一行求同一个表达式"""
import logging

import pandas as pd

from expression.parser import MathExprParser

logger = logging.getLogger(__name__)


def evaluate_frame(expression, frame: pd.DataFrame, columns=None) -> pd.Series:
    """
    每一行把选中的列作为变量（按列顺序）代入表达式求值
    Args:
        expression: 表达式文本或 MathExprParser
        frame: 每列一个变量
        columns: 参与替换的列，默认全部列；列名必须以 'name' 形式出现在表达式中
    Returns:
        与 frame 同索引的 float Series
    """
    parser = expression if isinstance(expression, MathExprParser) else MathExprParser(expression)
    if columns is None:
        columns = list(frame.columns)
    else:
        columns = list(columns)

    if frame.empty:
        return pd.Series(dtype=float, index=frame.index, name=parser.expression)

    sub = frame[columns]
    values = [
        parser.calculate(list(zip(columns, row)))
        for row in sub.itertuples(index=False, name=None)
    ]
    logger.debug(f"Evaluated {parser.expression!r} over {len(values)} rows")
    return pd.Series(values, index=frame.index, dtype=float, name=parser.expression)
