"""双栈求值器 - 操作数栈 + 操作符栈，按优先级即时规约"""
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import NotEnoughElements, StackUnderflow, UnbalancedGroup
from core.operators import OpKind, Operators

logger = logging.getLogger(__name__)


class Evaluator:
    """
    一次求值调用独占的两个栈
    Args:
        grouping: 是否支持括号，None 时取 EVALUATOR_CONFIG
        dtype: 操作数范围，None 时取 EVALUATOR_CONFIG
    """

    def __init__(self, grouping=None, dtype=None):
        self.nums = []
        self.ops = []
        self.grouping = EVALUATOR_CONFIG["grouping"] if grouping is None else grouping
        self.dtype = dtype or EVALUATOR_CONFIG["operand_dtype"]

    def ops_empty(self):
        return len(self.ops) == 0

    def top_op(self):
        return self.ops[-1] if self.ops else None

    def _is_group_marker(self, op):
        return self.grouping and op is not None and op.kind == OpKind.OPEN_GROUP

    def push_operand(self, value):
        self.nums.append(value)
        logger.debug(f"operands: {self.nums}")

    def push_operator(self, op):
        """先规约所有优先级 >= op 的挂起操作符，再入栈"""
        if self.grouping and op.kind == OpKind.OPEN_GROUP:
            self.ops.append(op)
        elif self.grouping and op.kind == OpKind.CLOSE_GROUP:
            self._close_group()
        else:
            while not self.ops_empty():
                top = self.top_op()
                # "(" 标记是屏障
                if self._is_group_marker(top) or top.prec < op.prec:
                    break
                self.reduce()
            self.ops.append(op)
        logger.debug(f"operators: {self.ops}")

    def _close_group(self):
        """规约到匹配的 "(" 为止，并丢弃该标记"""
        while not self.ops_empty():
            if self._is_group_marker(self.top_op()):
                self.ops.pop()
                return
            self.reduce()
        raise UnbalancedGroup("')' without matching '('")

    def reduce(self):
        """弹出两个操作数和一个操作符，计算后结果入栈"""
        if len(self.nums) < 2 or self.ops_empty():
            raise NotEnoughElements(
                f"reduce needs 2 operands and 1 operator, "
                f"have {len(self.nums)} and {len(self.ops)}"
            )

        rhs = self.nums.pop()  # 后入栈的是右操作数
        lhs = self.nums.pop()
        op = self.ops.pop()

        result = Operators.apply(op.kind, lhs, rhs, self.dtype)
        logger.debug(f"reduce: {lhs} {op.kind.name} {rhs} = {result}")
        self.nums.append(result)

    def drain(self):
        while not self.ops_empty():
            if self._is_group_marker(self.top_op()):
                raise UnbalancedGroup("'(' without matching ')'")
            self.reduce()

    def result(self):
        if len(self.nums) != 1:
            raise StackUnderflow(f"expected 1 operand after draining, found {len(self.nums)}")
        return self.nums[0]
