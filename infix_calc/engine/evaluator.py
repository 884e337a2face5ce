"""Postfix evaluation over a float operand stack with IEEE double semantics."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable, List, Mapping

from .errors import (
    DivisionByZeroError,
    InsufficientOperandsError,
    InvalidExpressionError,
    NegativeSqrtError,
    NumberParseError,
    UnknownFunctionError,
)
from .tokens import TokenKind, TokenSequence

BinaryOp = Callable[[float, float], float]
UnaryOp = Callable[[float], float]


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _remainder(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _power(a: float, b: float) -> float:
    """Raises ``a`` to ``b`` the way C ``pow`` does instead of raising."""
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


def _sqrt(value: float) -> float:
    if value < 0:
        raise NegativeSqrtError()
    return math.sqrt(value)


def _periodic(fn: UnaryOp) -> UnaryOp:
    def apply(value: float) -> float:
        try:
            return fn(value)
        except ValueError:
            # infinite argument
            return math.nan

    return apply


BINARY_OPERATORS: Mapping[str, BinaryOp] = MappingProxyType(
    {
        "+": lambda a, b: a + b,
        "-": lambda a, b: a - b,
        "*": lambda a, b: a * b,
        "/": _divide,
        "%": _remainder,
        "^": _power,
    }
)

FUNCTIONS: Mapping[str, UnaryOp] = MappingProxyType(
    {
        "sqrt": _sqrt,
        "sin": _periodic(math.sin),
        "cos": _periodic(math.cos),
        "tan": _periodic(math.tan),
    }
)


def parse_number(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise NumberParseError(text) from exc
    if math.isinf(value):
        raise NumberParseError(text, "value out of range")
    return value


def evaluate(postfix: TokenSequence) -> float:
    """Executes a postfix token sequence.

    Args:
        postfix: Tokens in postfix order, as produced by ``to_postfix``.

    Returns:
        The single value left on the operand stack.

    Raises:
        NumberParseError: A number literal cannot be read as a double.
        InsufficientOperandsError: An operator or function lacks operands.
        DivisionByZeroError: Divisor is exactly zero.
        NegativeSqrtError: ``sqrt`` received a negative operand.
        UnknownFunctionError: Function name is not supported.
        InvalidExpressionError: The stack does not reduce to one value.
    """
    stack: List[float] = []

    for token in postfix:
        if token.kind == TokenKind.NUMBER:
            stack.append(parse_number(token.text))
        elif token.kind == TokenKind.OPERATOR:
            if len(stack) < 2:
                raise InsufficientOperandsError("operator", token.text)
            b = stack.pop()
            a = stack.pop()
            op = BINARY_OPERATORS.get(token.text)
            if op is None:
                raise InvalidExpressionError()
            stack.append(op(a, b))
        elif token.kind == TokenKind.FUNCTION:
            if not stack:
                raise InsufficientOperandsError("function", token.text)
            fn = FUNCTIONS.get(token.text.lower())
            if fn is None:
                raise UnknownFunctionError(token.text)
            stack.append(fn(stack.pop()))
        else:
            raise InvalidExpressionError()

    if len(stack) != 1:
        raise InvalidExpressionError()
    return stack[0]
