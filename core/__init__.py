"""核心模块 - 操作符模型、Token分类、双栈求值器和求值驱动"""
from .errors import (
    CalculatorError, ReadError, ParseError, NotEnoughElements,
    UnknownOperator, StackUnderflow, DivisionByZero, UnsupportedConstruct,
    UnbalancedGroup, ArithmeticOverflow
)
from .operators import OpKind, Op, Operators, PRECEDENCE, CHAR_OPS
from .token_system import TokenType, Token, classify_token
from .token_reader import read_tokens
from .evaluator import Evaluator
from .driver import DriverState, EvaluationDriver, evaluate

__all__ = [
    'CalculatorError', 'ReadError', 'ParseError', 'NotEnoughElements',
    'UnknownOperator', 'StackUnderflow', 'DivisionByZero',
    'UnsupportedConstruct', 'UnbalancedGroup', 'ArithmeticOverflow',
    'OpKind', 'Op', 'Operators', 'PRECEDENCE', 'CHAR_OPS',
    'TokenType', 'Token', 'classify_token', 'read_tokens',
    'Evaluator', 'DriverState', 'EvaluationDriver', 'evaluate'
]
