"""Input preparation applied at the boundaries that accept untrusted text."""

from __future__ import annotations

from typing import Optional

from .errors import ExpressionTooLongError

DEFAULT_MAX_LENGTH = 1000

_UNICODE_REPLACEMENTS = {
    "−": "-",
    "–": "-",
    "—": "-",
    "×": "*",
    "÷": "/",
    "·": "*",
    "∙": "*",
    "⁄": "/",
}

_SUPERSCRIPT_MAP = {
    "⁰": "0",
    "¹": "1",
    "²": "2",
    "³": "3",
    "⁴": "4",
    "⁵": "5",
    "⁶": "6",
    "⁷": "7",
    "⁸": "8",
    "⁹": "9",
    "⁻": "-",
}


def normalize_math_unicode(expression: str) -> str:
    """Maps typographic math glyphs onto the ASCII operators the lexer accepts.

    A run of superscripts becomes an explicit power, so ``2³`` reads ``2^3``
    and ``10⁻²`` reads ``10^-2``.
    """
    if not expression:
        return expression

    for source, target in _UNICODE_REPLACEMENTS.items():
        expression = expression.replace(source, target)

    result_chars = []
    i = 0
    while i < len(expression):
        char = expression[i]
        if char in _SUPERSCRIPT_MAP:
            exponent = []
            while i < len(expression) and expression[i] in _SUPERSCRIPT_MAP:
                exponent.append(_SUPERSCRIPT_MAP[expression[i]])
                i += 1
            result_chars.append("^" + "".join(exponent))
            continue

        result_chars.append(char)
        i += 1

    return "".join(result_chars)


def prepare_expression(
    expression: str,
    max_length: Optional[int] = DEFAULT_MAX_LENGTH,
    normalize_unicode: bool = False,
) -> str:
    """Strips, optionally normalizes and length-checks an incoming expression.

    Args:
        expression: Raw text received from a caller.
        max_length: Longest accepted expression, ``None`` disables the check.
        normalize_unicode: Rewrite typographic glyphs to ASCII first.

    Returns:
        Text ready for ``calculate``.

    Raises:
        ExpressionTooLongError: If the prepared text exceeds ``max_length``.
    """
    prepared = (expression or "").strip()
    if normalize_unicode:
        prepared = normalize_math_unicode(prepared)
    if max_length is not None and len(prepared) > max_length:
        raise ExpressionTooLongError(max_length)
    return prepared
