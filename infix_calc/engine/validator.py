"""Structural checks over token sequences, run before conversion."""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping

from .errors import LeadingTokenError, TrailingTokenError, UnexpectedTokenError
from .tokens import Token, TokenKind, TokenSequence

_ILLEGAL_FIRST = frozenset({TokenKind.OPERATOR, TokenKind.RIGHT_PAREN})
_ILLEGAL_LAST = frozenset({TokenKind.OPERATOR, TokenKind.FUNCTION, TokenKind.LEFT_PAREN})

_OPERAND_START = frozenset({TokenKind.NUMBER, TokenKind.FUNCTION, TokenKind.LEFT_PAREN})
_OPERAND_END = frozenset({TokenKind.OPERATOR, TokenKind.RIGHT_PAREN})

ILLEGAL_SUCCESSORS: Mapping[TokenKind, FrozenSet[TokenKind]] = MappingProxyType(
    {
        TokenKind.NUMBER: _OPERAND_START,
        TokenKind.OPERATOR: _OPERAND_END,
        TokenKind.FUNCTION: _OPERAND_END,
        TokenKind.LEFT_PAREN: _OPERAND_END,
        TokenKind.RIGHT_PAREN: _OPERAND_START,
    }
)


def _describe(token: Token) -> str:
    if token.kind == TokenKind.NUMBER:
        return "number '{}'".format(token.text)
    if token.kind == TokenKind.OPERATOR:
        return "operator '{}'".format(token.text)
    if token.kind == TokenKind.FUNCTION:
        return "function '{}'".format(token.text)
    return "'{}'".format(token.text)


def validate(tokens: TokenSequence) -> None:
    """Rejects token sequences with illegal boundaries or adjacent pairs.

    Parenthesis balance and function names are left to later stages.

    Raises:
        LeadingTokenError: Sequence starts with an operator or ``)``.
        TrailingTokenError: Sequence ends with an operator, function or ``(``.
        UnexpectedTokenError: Two neighbouring tokens cannot follow each other.
    """
    if not tokens:
        return

    first = tokens[0]
    if first.kind in _ILLEGAL_FIRST:
        raise LeadingTokenError(first.text)

    last = tokens[-1]
    if last.kind in _ILLEGAL_LAST:
        raise TrailingTokenError(last.text)

    for current, following in zip(tokens, tokens[1:]):
        if following.kind in ILLEGAL_SUCCESSORS[current.kind]:
            raise UnexpectedTokenError(following.text, current.text, _describe(current))
