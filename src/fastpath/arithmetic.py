"""Computational checkpoints with a single binary operation.

Anything longer than ``<int> <op> <int>`` is left to the oracle, which has the full
expression evaluator available as a tool.
"""

from __future__ import annotations

import re
import logging

from src.errors import CalculationError
from src.text.cues import requires_pound
from src.state.payloads import Payload, EnterDigits, with_pound
from src.tools.calculate import format_number, calculate_operation

from .context import FastPathContext

logger = logging.getLogger(__name__)

_COMPUTE_RE = re.compile(r"compute|calculate", re.IGNORECASE)
_TRANSMIT_RE = re.compile(r"transmit|enter|respond", re.IGNORECASE)
_EXPRESSION_RE = re.compile(r":\s*(Math\.floor\([\s\S]*\)|[0-9\s+\-*/%().]+)$", re.IGNORECASE)
_SINGLE_OP_RE = re.compile(r"(\d+)\s*([+\-*/%])\s*(\d+)")


def extract_expression(sentence: str) -> str | None:
    match = _EXPRESSION_RE.search(sentence.strip())
    if not match:
        return None
    return match.group(1).strip().rstrip(".").strip()


async def arithmetic_rule(sentence: str, _ctx: FastPathContext) -> Payload | None:
    if not (_COMPUTE_RE.search(sentence) and _TRANSMIT_RE.search(sentence)):
        return None

    expression = extract_expression(sentence)
    if expression is None:
        return None
    operation = _SINGLE_OP_RE.fullmatch(expression)
    if operation is None:
        logger.debug("fastpath: expression %r is not a single operation; deferring", expression)
        return None

    left, symbol, right = operation.groups()
    # int() raises ValueError past the interpreter's integer digit limit.
    try:
        result = calculate_operation(symbol, int(left), int(right))
        if isinstance(result, float) and not result.is_integer():
            return None
        digits = format_number(result)
    except (CalculationError, ValueError) as exc:
        logger.info("fastpath: arithmetic abstained: %s", exc)
        return None
    return EnterDigits(digits=with_pound(digits, requires_pound(sentence)))


__all__ = ["arithmetic_rule", "extract_expression"]
