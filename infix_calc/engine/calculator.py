"""Single entry point chaining the four pipeline stages."""

from __future__ import annotations

import logging
from typing import Any, Dict

from .converter import to_postfix
from .errors import CalculationError
from .evaluator import evaluate
from .tokenizer import tokenize
from .validator import validate

logger = logging.getLogger("infix_calc.engine")

METHOD = "shunting_yard"


def calculate(expression: str) -> float:
    """Evaluates an infix arithmetic expression.

    Args:
        expression: Text such as ``"2 + 3 * sqrt(4)"``.

    Returns:
        The double-precision result, possibly NaN or infinite.

    Raises:
        CalculationError: From the first stage that rejects the input.
    """
    tokens = tokenize(expression)
    validate(tokens)
    postfix = to_postfix(tokens)
    logger.debug("postfix expression=%r postfix=%s", expression, " ".join(t.text for t in postfix))
    return evaluate(postfix)


def _ok(result: Any, method: str, **metadata: Any) -> Dict[str, Any]:
    return {"ok": True, "result": result, "method": method, "metadata": metadata}


def _error(message: str, method: str, **metadata: Any) -> Dict[str, Any]:
    return {"ok": False, "error": message, "method": method, "metadata": metadata}


def evaluate_expression(expression: str) -> Dict[str, Any]:
    try:
        value = calculate(expression)
        return _ok(value, METHOD, expression=expression)
    except CalculationError as exc:
        return _error(str(exc), METHOD, expression=expression, code=exc.code)
