"""core/token_system.py"""
from enum import Enum

from core.errors import ParseError
from core.operators import CHAR_OPS, Op, operand_limits

DIGITS = frozenset('0123456789')


class TokenType(Enum):
    NUMBER = "number"  # 操作数
    OPERATOR = "operator"  # 操作符


class Token:
    def __init__(self, token_type, value=None, op=None):
        self.type = token_type
        self.value = value  # NUMBER 的整数值
        self.op = op  # OPERATOR 的 Op

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, value=value)

    @classmethod
    def operator(cls, op):
        return cls(TokenType.OPERATOR, op=op)

    def __eq__(self, other):
        return (isinstance(other, Token) and other.type == self.type
                and other.value == self.value and other.op == self.op)

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(NUMBER, {self.value})"
        return f"Token(OPERATOR, {self.op.kind.name})"


def is_number(text):
    """每个字符都是 ASCII 十进制数字（空串也算，交给 parse 报错）"""
    return all(c in DIGITS for c in text)


def is_operator(text):
    return len(text) == 1 and text in CHAR_OPS


def parse_number(text, dtype=None):
    if not text:
        raise ParseError("empty number token")
    _, high = operand_limits(dtype)
    # 先按位数拒绝，避免超长数字串触发 int() 的位数上限
    digits = text.lstrip('0') or '0'
    if len(digits) > len(str(high)):
        raise ParseError(f"number {text[:20]}... exceeds {high}")
    value = int(digits)
    if value > high:
        raise ParseError(f"number {text} exceeds {high}")
    return value


def classify_token(text, dtype=None):
    """
    把一个文本 token 分类为数字或操作符
    Args:
        text: 单个 token（会先去掉首尾空白）
        dtype: 操作数范围
    Returns:
        Token
    """
    text = text.strip()
    if is_number(text):
        return Token.number(parse_number(text, dtype))
    if is_operator(text):
        return Token.operator(Op.from_char(text))
    raise ParseError(f"unrecognized token {text!r}")
