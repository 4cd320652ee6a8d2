"""
ChecklistItem Value Object - one line of a task's checklist.
"""

from dataclasses import dataclass, replace

from taskboard.errors import DomainValidationError

MAX_ITEM_LENGTH = 200


@dataclass(frozen=True)
class ChecklistItem:
    text: str
    done: bool = False

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text.strip():
            raise DomainValidationError("checklist_item", "Checklist item cannot be empty")
        if len(self.text.strip()) > MAX_ITEM_LENGTH:
            raise DomainValidationError(
                "checklist_item",
                f"Checklist item cannot exceed {MAX_ITEM_LENGTH} characters",
            )
        if not isinstance(self.done, bool):
            raise DomainValidationError("checklist_item", "done must be a boolean")
        object.__setattr__(self, "text", self.text.strip())

    def mark_done(self) -> "ChecklistItem":
        return replace(self, done=True)
