"""
OwnerEmail Value Object - email of the user who owns a task.
"""

from dataclasses import dataclass

from taskboard.errors import DomainValidationError


@dataclass(frozen=True)
class OwnerEmail:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or self.value.count("@") != 1:
            raise DomainValidationError("owner", f"Invalid owner email: {self.value}")
        local, domain = self.value.split("@")
        if not local or not domain:
            raise DomainValidationError("owner", f"Invalid owner email: {self.value}")

    def __str__(self) -> str:
        return self.value
