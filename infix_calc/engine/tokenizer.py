"""Lexer turning raw infix text into typed tokens."""

from __future__ import annotations

from typing import List, Optional

from .errors import InvalidNumberFormatError, UnexpectedCharacterError
from .tokens import LEFT_PAREN, OPERATOR_SYMBOLS, RIGHT_PAREN, Token, TokenKind, TokenSequence, function, number, operator

_DIGITS = frozenset("0123456789")
_SIGN_CONTEXT = frozenset({TokenKind.OPERATOR, TokenKind.LEFT_PAREN})


def _starts_number(char: str) -> bool:
    return char in _DIGITS or char == "."


def starts_signed_number(previous: Optional[TokenKind], char: str, lookahead: Optional[str]) -> bool:
    """Tells whether a minus sign belongs to the numeric literal that follows it.

    Args:
        previous: Kind of the last emitted token, or ``None`` at the start.
        char: Current character.
        lookahead: Character right after ``char``, or ``None`` at end of input.

    Returns:
        True when ``char`` is a ``-`` directly followed by a digit or decimal
        point and placed where a binary operator cannot be.
    """
    if char != "-" or lookahead is None or not _starts_number(lookahead):
        return False
    return previous is None or previous in _SIGN_CONTEXT


def _scan_number(expression: str, start: int) -> int:
    """Returns the index right after the digit/decimal-point run beginning at ``start``."""
    end = start
    seen_point = False
    while end < len(expression) and _starts_number(expression[end]):
        if expression[end] == ".":
            if seen_point:
                raise InvalidNumberFormatError()
            seen_point = True
        end += 1
    return end


def _scan_letters(expression: str, start: int) -> int:
    end = start
    while end < len(expression) and expression[end].isalpha():
        end += 1
    return end


def tokenize(expression: str) -> TokenSequence:
    tokens: List[Token] = []
    i = 0
    while i < len(expression):
        char = expression[i]

        if char.isspace():
            i += 1
            continue

        if _starts_number(char):
            end = _scan_number(expression, i)
            tokens.append(number(expression[i:end]))
            i = end
        elif char == "(":
            tokens.append(LEFT_PAREN)
            i += 1
        elif char == ")":
            tokens.append(RIGHT_PAREN)
            i += 1
        elif char in OPERATOR_SYMBOLS:
            previous = tokens[-1].kind if tokens else None
            lookahead = expression[i + 1] if i + 1 < len(expression) else None
            if starts_signed_number(previous, char, lookahead):
                end = _scan_number(expression, i + 1)
                tokens.append(number(expression[i:end]))
                i = end
            else:
                tokens.append(operator(char))
                i += 1
        elif char.isalpha():
            end = _scan_letters(expression, i)
            tokens.append(function(expression[i:end]))
            i = end
        else:
            raise UnexpectedCharacterError(char)

    return tuple(tokens)
