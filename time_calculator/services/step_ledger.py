"""Ordered ledger of committed calculation steps."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from time_calculator.models.operator import Operator
from time_calculator.models.step import CalculationStep
from time_calculator.utils.duration import format_duration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepLedger:
    """Immutable sequence of steps making up the expression in progress.

    Steps keep entry order. The step committed by evaluate has no operator and
    is last until the user extends the chain with another operator.
    """

    steps: tuple[CalculationStep, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[CalculationStep]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> CalculationStep:
        return self.steps[index]

    @property
    def is_empty(self) -> bool:
        return not self.steps

    @property
    def last(self) -> CalculationStep | None:
        return self.steps[-1] if self.steps else None

    def commit_value(self, value: int, operator: Operator | None) -> "StepLedger":
        """Append a step.

        Args:
            value: Signed seconds being committed
            operator: Operator that will combine ``value`` with the next value,
                or None when evaluating

        Returns:
            The extended ledger
        """
        return StepLedger(self.steps + (CalculationStep(value=value, operator=operator),))

    def remove_at(self, index: int) -> "StepLedger":
        """Drop the step at ``index``; an index out of range is ignored."""
        if not 0 <= index < len(self.steps):
            logger.debug(f"Ignoring removal of step {index} from ledger of {len(self.steps)}")
            return self
        return StepLedger(self.steps[:index] + self.steps[index + 1 :])

    def clear(self) -> "StepLedger":
        return StepLedger()

    def trace_parts(self) -> list[str]:
        """Display strings of each step, e.g. ``["02:00:00 +", "01:00:00"]``."""
        parts = []
        for step in self.steps:
            text = format_duration(step.value)
            if step.operator is not None:
                text = f"{text} {step.operator.symbol}"
            parts.append(text)
        return parts

    def trace(self) -> str:
        """Running-expression readout of the whole ledger."""
        return " ".join(self.trace_parts())
