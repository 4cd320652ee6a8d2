"""
Priority Value Object.
"""

from dataclasses import dataclass

from taskboard.errors import DomainValidationError

PRIORITIES = ("low", "normal", "high", "urgent")


@dataclass(frozen=True)
class Priority:
    value: str = "normal"

    def __post_init__(self):
        if self.value not in PRIORITIES:
            raise DomainValidationError(
                "priority",
                f"Invalid priority: {self.value}. Must be one of {list(PRIORITIES)}.",
            )

    def __str__(self) -> str:
        return self.value
