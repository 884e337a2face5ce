"""Error taxonomy raised by the expression pipeline."""

from __future__ import annotations


class CalculationError(ValueError):
    """Base class for every error raised while calculating an expression."""

    code = "calculation_error"


class InvalidNumberFormatError(CalculationError):
    code = "invalid_number_format"

    def __init__(self) -> None:
        super().__init__("unexpected number of decimal points")


class UnexpectedCharacterError(CalculationError):
    code = "unexpected_character"

    def __init__(self, char: str) -> None:
        super().__init__("unexpected character: {}".format(char))
        self.char = char


class LeadingTokenError(CalculationError):
    code = "leading_token"

    def __init__(self, text: str) -> None:
        super().__init__("expression cannot start with '{}'".format(text))
        self.text = text


class TrailingTokenError(CalculationError):
    code = "trailing_token"

    def __init__(self, text: str) -> None:
        super().__init__("expression cannot end with '{}'".format(text))
        self.text = text


class UnexpectedTokenError(CalculationError):
    """Raised when two adjacent tokens cannot follow each other."""

    code = "unexpected_token"

    def __init__(self, text: str, previous: str, context: str) -> None:
        super().__init__("unexpected token '{}' after {}".format(text, context))
        self.text = text
        self.previous = previous


class MismatchedParenthesesError(CalculationError):
    code = "mismatched_parentheses"

    def __init__(self) -> None:
        super().__init__("mismatched parentheses")


class InsufficientOperandsError(CalculationError):
    code = "insufficient_operands"

    def __init__(self, role: str, symbol: str) -> None:
        super().__init__("insufficient operands for {} {}".format(role, symbol))
        self.symbol = symbol


class DivisionByZeroError(CalculationError):
    code = "division_by_zero"

    def __init__(self) -> None:
        super().__init__("division by zero")


class NegativeSqrtError(CalculationError):
    code = "negative_sqrt"

    def __init__(self) -> None:
        super().__init__("sqrt of negative number")


class UnknownFunctionError(CalculationError):
    code = "unknown_function"

    def __init__(self, name: str) -> None:
        super().__init__("unknown function {}".format(name))
        self.name = name


class InvalidExpressionError(CalculationError):
    code = "invalid_expression"

    def __init__(self) -> None:
        super().__init__("invalid expression")


class NumberParseError(CalculationError):
    code = "number_parse_error"

    def __init__(self, text: str, reason: str = "invalid syntax") -> None:
        super().__init__("cannot parse number '{}': {}".format(text, reason))
        self.text = text


class ExpressionTooLongError(CalculationError):
    code = "expression_too_long"

    def __init__(self, max_length: int) -> None:
        super().__init__("Expression exceeds max length of {} characters.".format(max_length))
        self.max_length = max_length
