"""core/operators.py"""
from enum import Enum
import logging

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.errors import (
    ArithmeticOverflow, DivisionByZero, UnknownOperator, UnsupportedConstruct
)

logger = logging.getLogger(__name__)


class OpKind(Enum):
    ADD = "add"  # +
    SUBTRACT = "sub"  # -
    MULTIPLY = "mul"  # *
    DIVIDE = "div"  # /
    OPEN_GROUP = "open_group"  # (
    CLOSE_GROUP = "close_group"  # )

    UNRECOGNIZED = "unrecognized"


# 优先级：数值越大越先规约
PRECEDENCE = {
    OpKind.ADD: 1,
    OpKind.SUBTRACT: 1,
    OpKind.MULTIPLY: 2,
    OpKind.DIVIDE: 2,
    OpKind.OPEN_GROUP: 3,  # 括号只参与栈比较
    OpKind.CLOSE_GROUP: 3,

    OpKind.UNRECOGNIZED: 0,
}

CHAR_TO_KIND = {
    '+': OpKind.ADD,
    '-': OpKind.SUBTRACT,
    '*': OpKind.MULTIPLY,
    '/': OpKind.DIVIDE,
    '(': OpKind.OPEN_GROUP,
    ')': OpKind.CLOSE_GROUP,
}

CHAR_OPS = frozenset(CHAR_TO_KIND)

GROUPING_KINDS = (OpKind.OPEN_GROUP, OpKind.CLOSE_GROUP)


class Op:
    """操作符种类 + 优先级"""

    def __init__(self, kind):
        self.kind = kind
        self.prec = PRECEDENCE[kind]

    @classmethod
    def from_char(cls, c):
        return cls(CHAR_TO_KIND.get(c, OpKind.UNRECOGNIZED))

    @property
    def is_grouping(self):
        return self.kind in GROUPING_KINDS

    def __eq__(self, other):
        return isinstance(other, Op) and other.kind == self.kind

    def __hash__(self):
        return hash(self.kind)

    def __repr__(self):
        return f"Op({self.kind.name}, prec={self.prec})"


def operand_limits(dtype=None):
    """操作数的取值范围 (min, max)"""
    info = np.iinfo(np.dtype(dtype or EVALUATOR_CONFIG["operand_dtype"]))
    return int(info.min), int(info.max)


class Operators:
    """二元算术操作符的静态方法集合"""

    @staticmethod
    def add(lhs, rhs):
        return lhs + rhs

    @staticmethod
    def sub(lhs, rhs):
        return lhs - rhs

    @staticmethod
    def mul(lhs, rhs):
        return lhs * rhs

    @staticmethod
    def div(lhs, rhs):
        """整数除法，向零截断"""
        if rhs == 0:
            raise DivisionByZero(f"{lhs} / 0")
        quotient = abs(lhs) // abs(rhs)
        return quotient if (lhs < 0) == (rhs < 0) else -quotient

    @staticmethod
    def _check_range(value, dtype=None):
        low, high = operand_limits(dtype)
        if not low <= value <= high:
            raise ArithmeticOverflow(f"{value} outside [{low}, {high}]")
        return value

    @staticmethod
    def apply(kind, lhs, rhs, dtype=None):
        """
        计算 lhs OP rhs
        Args:
            kind: OpKind
            lhs: 先入栈的操作数（左侧）
            rhs: 后入栈的操作数（右侧）
            dtype: 操作数范围，默认取 EVALUATOR_CONFIG
        Returns:
            int 结果
        """
        if kind == OpKind.UNRECOGNIZED:
            raise UnknownOperator(f"cannot apply {kind.name}")
        if kind in GROUPING_KINDS:
            raise UnsupportedConstruct(f"grouping token {kind.name} reached reduction")

        op_method = getattr(Operators, kind.value, None)
        if op_method is None:
            raise UnknownOperator(f"no implementation for {kind.name}")

        result = op_method(lhs, rhs)
        return Operators._check_range(result, dtype)
