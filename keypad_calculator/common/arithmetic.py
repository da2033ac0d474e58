"""Integer arithmetic behind the calculate key."""
from collections.abc import Callable
import math
import operator
import re
from typing import Dict, Union

from keypad_calculator.common.models import Operator


Number = Union[int, float]

# Operand strings must look like an integer literal (an optional sign comes from a negative result)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class EvaluationError(ValueError):
    """Raised when the calculate key cannot produce a result."""


def true_divide(a: int, b: int) -> float:
    """
    Divide with IEEE-754 semantics instead of raising on a zero divisor.

    :param int a: Dividend
    :param int b: Divisor

    :return: a / b, ``inf``/``-inf`` when b is zero, ``nan`` for 0 / 0
    :rtype: float
    :raises EvaluationError: If the quotient does not fit in a float
    """
    if b == 0:
        if a == 0:
            return math.nan
        return math.copysign(math.inf, a)
    try:
        return a / b
    except OverflowError as exc:
        raise EvaluationError(f"Quotient out of range: {exc}") from exc


OPERATIONS: Dict[Operator, Callable[[int, int], Number]] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: true_divide,
}


def parse_operand(text: str) -> int:
    """
    Parse an operand string with integer semantics.

    :param str text: Operand as accumulated by the evaluator

    :return: Integer value
    :rtype: int
    :raises EvaluationError: If the text is empty or not an integer (e.g. "3.5", "inf")
    """
    if not _INTEGER_RE.fullmatch(text):
        raise EvaluationError(f"Operand is not an integer: {text!r}")
    try:
        return int(text)
    except ValueError as exc:
        # Longer than the interpreter's int/str conversion limit
        raise EvaluationError(f"Operand too long: {exc}") from exc


def compute(left: str, op: Operator, right: str) -> str:
    """
    Evaluate ``left op right`` and stringify the result.

    Addition, subtraction and multiplication stay in integers; division is
    a true (floating-point) division of the same integers.

    :param str left: Left operand string
    :param Operator op: Operator to apply, must not be Operator.NONE
    :param str right: Right operand string

    :return: Result as it will be shown on the display
    :rtype: str
    :raises EvaluationError: If an operand is malformed or no operator is set
    """
    if op is Operator.NONE:
        raise EvaluationError("No operator selected")
    a: int = parse_operand(left)
    b: int = parse_operand(right)
    result: Number = OPERATIONS[op](a, b)
    try:
        return str(result)
    except ValueError as exc:
        raise EvaluationError(f"Result too long to display: {exc}") from exc
