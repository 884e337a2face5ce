"""Token contracts shared by every pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    FUNCTION = "function"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


TokenSequence = Tuple[Token, ...]

OPERATOR_SYMBOLS = frozenset("+-*/%^")

# Binary operator precedence; equal precedence pops left to right, "^" included.
PRECEDENCE: Mapping[str, int] = MappingProxyType(
    {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
        "%": 2,
        "^": 3,
    }
)


def precedence(symbol: str) -> int:
    return PRECEDENCE.get(symbol, 0)


def number(text: str) -> Token:
    return Token(TokenKind.NUMBER, text)


def operator(symbol: str) -> Token:
    return Token(TokenKind.OPERATOR, symbol)


def function(name: str) -> Token:
    return Token(TokenKind.FUNCTION, name)


LEFT_PAREN = Token(TokenKind.LEFT_PAREN, "(")
RIGHT_PAREN = Token(TokenKind.RIGHT_PAREN, ")")
