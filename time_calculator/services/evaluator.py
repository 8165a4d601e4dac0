"""Left-to-right fold of a step ledger into a single duration."""

from collections.abc import Iterable

from time_calculator.models.operator import Operator
from time_calculator.models.step import CalculationStep
from time_calculator.utils.duration import SECONDS_PER_HOUR


def apply_operator(operator: Operator, total: float, value: int) -> float:
    """Combine the running total with the next value.

    Multiply and divide read the operand in hours, so a one-hour operand
    multiplies or divides by one. Dividing by a zero operand leaves the total
    unchanged.
    """
    if operator is Operator.ADD:
        return total + value
    if operator is Operator.SUBTRACT:
        return total - value
    if operator is Operator.MULTIPLY:
        return total * (value / SECONDS_PER_HOUR)
    if value == 0:
        return total
    return total / (value / SECONDS_PER_HOUR)


def fold(steps: Iterable[CalculationStep]) -> int:
    """Evaluate a ledger of steps.

    The operator stored on a step is applied between the running total and
    the value of the step that follows it; the first value is added to zero.
    Intermediate values are floats and the result is truncated toward zero once
    at the end.

    Args:
        steps: Steps in entry order

    Returns:
        Signed result in whole seconds

    Example:
        >>> fold([CalculationStep(7200, Operator.MULTIPLY), CalculationStep(7200)])
        14400
    """
    total = 0.0
    pending = Operator.ADD
    for step in steps:
        total = apply_operator(pending, total, step.value)
        pending = step.operator or Operator.ADD
    return int(total)
