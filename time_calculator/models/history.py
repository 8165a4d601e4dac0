"""Data model for calculation history entries."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from time_calculator.exceptions import RestoreFailure
from time_calculator.models.step import CalculationStep
from time_calculator.utils.duration import (
    format_duration,
    format_hours_minutes,
    total_hours,
)


@dataclass(frozen=True)
class HistoryEntry:
    """A single completed evaluation, with the ledger that produced it."""

    id: str
    result_seconds: int
    label: str
    color_tag: str
    created_at: datetime
    last_modified: datetime
    steps: tuple[CalculationStep, ...] = field(default_factory=tuple)

    @property
    def display_string(self) -> str:
        """Result formatted as HH:MM:SS."""
        return format_duration(self.result_seconds)

    @property
    def summary(self) -> str:
        """Result formatted as ``Xh Ym``."""
        return format_hours_minutes(self.result_seconds)

    @property
    def total_hours(self) -> float:
        return total_hours(self.result_seconds)

    @property
    def expression(self) -> str:
        """The full expression, e.g. ``02:00:00 + 01:00:00 = 03:00:00``."""
        parts = []
        for step in self.steps:
            text = format_duration(step.value)
            if step.operator is not None:
                text = f"{text} {step.operator.symbol}"
            parts.append(text)
        parts.append(f"= {self.display_string}")
        return " ".join(parts)

    def with_details(
        self,
        modified_at: datetime,
        label: str | None = None,
        color_tag: str | None = None,
    ) -> "HistoryEntry":
        """Return a copy with a new label and/or color; the result is untouched."""
        return replace(
            self,
            label=self.label if label is None else label,
            color_tag=self.color_tag if color_tag is None else color_tag,
            last_modified=modified_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted record shape."""
        return {
            "id": self.id,
            "resultSeconds": self.result_seconds,
            "label": self.label,
            "colorTag": self.color_tag,
            "createdAt": self.created_at.isoformat(),
            "lastModified": self.last_modified.isoformat(),
            "steps": [step.to_dict() for step in self.steps],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryEntry":
        """Build an entry from the persisted record shape.

        Raises:
            RestoreFailure: If a field is missing or malformed
        """
        try:
            return cls(
                id=str(data["id"]),
                result_seconds=int(data["resultSeconds"]),
                label=str(data.get("label", "")),
                color_tag=str(data.get("colorTag", "")),
                created_at=datetime.fromisoformat(data["createdAt"]),
                last_modified=datetime.fromisoformat(data["lastModified"]),
                steps=tuple(CalculationStep.from_dict(s) for s in data.get("steps", [])),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RestoreFailure(f"Invalid history record: {e}") from e

    def __str__(self) -> str:
        return f"HistoryEntry({self.label!r}, {self.display_string})"
