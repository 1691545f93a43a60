"""core/errors.py - 求值过程中的错误类型"""


class CalculatorError(Exception):
    """所有求值错误的基类，kind 为错误种类名"""
    kind = "CalculatorError"

    def __init__(self, message=None):
        super().__init__(message or self.kind)


class ReadError(CalculatorError):
    """token 源读取失败"""
    kind = "ReadError"


class ParseError(CalculatorError):
    """token 既不是数字也不是单字符操作符，或数字超出范围"""
    kind = "ParseError"


class NotEnoughElements(CalculatorError):
    """规约时操作数少于2个或没有操作符"""
    kind = "NotEnoughElements"


class UnknownOperator(CalculatorError):
    kind = "UnknownOperator"


class StackUnderflow(CalculatorError):
    """排空后操作数栈不恰好剩一个值"""
    kind = "StackUnderflow"


class DivisionByZero(CalculatorError):
    kind = "DivisionByZero"


class UnsupportedConstruct(CalculatorError):
    """括号进入了规约"""
    kind = "UnsupportedConstruct"


class UnbalancedGroup(CalculatorError):
    """括号不匹配"""
    kind = "UnbalancedGroup"


class ArithmeticOverflow(CalculatorError):
    """结果超出操作数范围"""
    kind = "ArithmeticOverflow"
