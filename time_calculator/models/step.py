"""Calculation step model and the stored steps payload codec."""

import json
from dataclasses import dataclass
from typing import Any

from time_calculator.exceptions import RestoreFailure
from time_calculator.models.operator import Operator


@dataclass(frozen=True)
class CalculationStep:
    """A committed value plus the operator that combines it with the next value.

    ``operator`` is None on the step committed by evaluate; the fold treats a
    missing operator as addition.
    """

    value: int  # Signed seconds
    operator: Operator | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stored ``{"valueSeconds", "operator"}`` shape."""
        return {
            "valueSeconds": self.value,
            "operator": self.operator.symbol if self.operator else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "CalculationStep":
        """Build a step from its stored shape.

        Raises:
            RestoreFailure: If the data does not have the stored shape
        """
        if not isinstance(data, dict):
            raise RestoreFailure(f"Step must be an object, got {type(data).__name__}")
        if "valueSeconds" not in data:
            raise RestoreFailure("Step is missing 'valueSeconds'")

        value = data["valueSeconds"]
        if isinstance(value, bool) or not isinstance(value, int):
            raise RestoreFailure(f"Step value must be an integer, got {value!r}")

        symbol = data.get("operator")
        if symbol is None:
            return cls(value=value, operator=None)

        operator = Operator.from_symbol(symbol) if isinstance(symbol, str) else None
        if operator is None:
            raise RestoreFailure(f"Unknown operator {symbol!r}")
        return cls(value=value, operator=operator)

    def __str__(self) -> str:
        suffix = f" {self.operator.symbol}" if self.operator else ""
        return f"{self.value}s{suffix}"


def encode_steps(steps) -> str:
    """Serialize steps to the compact JSON payload stored with history entries.

    Args:
        steps: Iterable of CalculationStep

    Returns:
        JSON text; decoding and re-encoding it yields the same text
    """
    return json.dumps(
        [step.to_dict() for step in steps],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def decode_steps(payload: str | bytes) -> tuple[CalculationStep, ...]:
    """Deserialize a stored steps payload.

    Args:
        payload: JSON text produced by ``encode_steps``

    Returns:
        Tuple of steps in entry order

    Raises:
        RestoreFailure: If the payload is not valid JSON or not a list of steps
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as e:
        raise RestoreFailure(f"Steps payload is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise RestoreFailure(f"Steps payload must be a list, got {type(data).__name__}")

    return tuple(CalculationStep.from_dict(item) for item in data)
