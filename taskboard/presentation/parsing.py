"""Parsing of raw path and header values at the HTTP boundary."""

from typing import Optional
from uuid import UUID

from taskboard.errors import InterfaceValidationError


def parse_task_id(raw: str) -> str:
    try:
        return str(UUID(raw))
    except ValueError:
        raise InterfaceValidationError(
            f"Malformed task id: {raw}", field="task_id"
        ) from None


def parse_if_match(raw: Optional[str]) -> Optional[int]:
    """
    Read a task version from an If-Match header.

    Accepts ``3``, ``"3"`` and ``W/"3"``. Returns None when the header is absent.
    """
    if raw is None:
        return None
    value = raw.strip()
    if value.startswith("W/"):
        value = value[2:]
    value = value.strip('"')
    if not value.isdigit() or int(value) < 1:
        raise InterfaceValidationError(
            "If-Match must carry a positive task version", field="If-Match"
        )
    return int(value)


def resolve_expected_version(
    header_version: Optional[int], body_version: Optional[int]
) -> int:
    if header_version is not None and body_version is not None and header_version != body_version:
        raise InterfaceValidationError(
            "If-Match header and expected_version disagree", field="expected_version"
        )
    version = header_version if header_version is not None else body_version
    if version is None:
        raise InterfaceValidationError(
            "expected_version or an If-Match header is required",
            field="expected_version",
        )
    return version
