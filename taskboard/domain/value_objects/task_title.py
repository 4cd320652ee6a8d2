"""
TaskTitle Value Object - stripped, 1..120 characters.
"""

from dataclasses import dataclass

from taskboard.errors import DomainValidationError

MAX_TITLE_LENGTH = 120


@dataclass(frozen=True)
class TaskTitle:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise DomainValidationError("title", "Title must be a string")
        stripped = self.value.strip()
        if not stripped:
            raise DomainValidationError("title", "Title cannot be empty")
        if len(stripped) > MAX_TITLE_LENGTH:
            raise DomainValidationError(
                "title", f"Title cannot exceed {MAX_TITLE_LENGTH} characters"
            )
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value
