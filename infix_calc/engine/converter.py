"""Shunting-yard conversion from infix to postfix token order."""

from __future__ import annotations

from typing import List

from .errors import MismatchedParenthesesError
from .tokens import Token, TokenKind, TokenSequence, precedence


def _pop_operators(stack: List[Token], output: List[Token], incoming: Token) -> None:
    # ">=" keeps every operator left-associative, "^" included.
    while stack and stack[-1].kind == TokenKind.OPERATOR:
        if precedence(stack[-1].text) < precedence(incoming.text):
            break
        output.append(stack.pop())


def _close_group(stack: List[Token], output: List[Token]) -> None:
    while stack:
        top = stack.pop()
        if top.kind == TokenKind.LEFT_PAREN:
            break
        output.append(top)
    else:
        raise MismatchedParenthesesError()

    if stack and stack[-1].kind == TokenKind.FUNCTION:
        output.append(stack.pop())


def to_postfix(tokens: TokenSequence) -> TokenSequence:
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if token.kind == TokenKind.NUMBER:
            output.append(token)
        elif token.kind in (TokenKind.FUNCTION, TokenKind.LEFT_PAREN):
            stack.append(token)
        elif token.kind == TokenKind.OPERATOR:
            _pop_operators(stack, output, token)
            stack.append(token)
        elif token.kind == TokenKind.RIGHT_PAREN:
            _close_group(stack, output)

    while stack:
        top = stack.pop()
        if top.kind == TokenKind.LEFT_PAREN:
            raise MismatchedParenthesesError()
        output.append(top)

    return tuple(output)
