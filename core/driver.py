"""求值驱动 - SCANNING -> DRAINING -> DONE"""
from enum import Enum
import logging

from core.evaluator import Evaluator
from core.token_reader import read_tokens
from core.token_system import TokenType, classify_token

logger = logging.getLogger(__name__)


class DriverState(Enum):
    SCANNING = "scanning"
    DRAINING = "draining"
    DONE = "done"


class EvaluationDriver:
    """把 token 逐个送入求值器，输入结束后排空操作符栈"""

    def __init__(self, grouping=None, dtype=None):
        self.evaluator = Evaluator(grouping=grouping, dtype=dtype)
        self.state = DriverState.SCANNING

    def feed(self, text):
        if self.state != DriverState.SCANNING:
            raise RuntimeError(f"cannot feed tokens in state {self.state.name}")

        token = classify_token(text, self.evaluator.dtype)
        if token.type == TokenType.NUMBER:
            self.evaluator.push_operand(token.value)
        else:
            self.evaluator.push_operator(token.op)

    def finish(self):
        """输入结束：排空并返回唯一剩余的操作数"""
        if self.state != DriverState.SCANNING:
            raise RuntimeError(f"cannot finish in state {self.state.name}")

        self.state = DriverState.DRAINING
        self.evaluator.drain()
        result = self.evaluator.result()
        self.state = DriverState.DONE
        return result

    def run(self, tokens):
        for text in tokens:
            self.feed(text)
        return self.finish()


def evaluate(source, grouping=None, dtype=None):
    """
    求值一个以空格分隔的表达式
    Args:
        source: str、bytes、可读流或 token 序列
        grouping: 是否支持括号，None 时取配置
        dtype: 操作数范围，None 时取配置
    Returns:
        int 结果；失败时抛出 CalculatorError 子类
    """
    result = EvaluationDriver(grouping=grouping, dtype=dtype).run(read_tokens(source))
    logger.debug(f"Final: {result}")
    return result
