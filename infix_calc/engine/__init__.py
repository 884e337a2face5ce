"""Infix expression engine: tokenizer, validator, shunting-yard and postfix evaluator."""

from .calculator import calculate, evaluate_expression
from .converter import to_postfix
from .errors import (
    CalculationError,
    DivisionByZeroError,
    ExpressionTooLongError,
    InsufficientOperandsError,
    InvalidExpressionError,
    InvalidNumberFormatError,
    LeadingTokenError,
    MismatchedParenthesesError,
    NegativeSqrtError,
    NumberParseError,
    TrailingTokenError,
    UnexpectedCharacterError,
    UnexpectedTokenError,
    UnknownFunctionError,
)
from .evaluator import evaluate
from .tokenizer import starts_signed_number, tokenize
from .tokens import Token, TokenKind, TokenSequence
from .utils import normalize_math_unicode, prepare_expression
from .validator import validate

__all__ = [
    "calculate",
    "evaluate_expression",
    "tokenize",
    "starts_signed_number",
    "validate",
    "to_postfix",
    "evaluate",
    "prepare_expression",
    "normalize_math_unicode",
    "Token",
    "TokenKind",
    "TokenSequence",
    "CalculationError",
    "DivisionByZeroError",
    "ExpressionTooLongError",
    "InsufficientOperandsError",
    "InvalidExpressionError",
    "InvalidNumberFormatError",
    "LeadingTokenError",
    "MismatchedParenthesesError",
    "NegativeSqrtError",
    "NumberParseError",
    "TrailingTokenError",
    "UnexpectedCharacterError",
    "UnexpectedTokenError",
    "UnknownFunctionError",
]
