"""
UUIDv7 identifiers - implements the IdGenerator port.

Layout (RFC 9562):
- 48 bits  unix timestamp in milliseconds
- 4 bits   version (7)
- 12 bits  random
- 2 bits   variant (0b10)
- 62 bits  random

The timestamp prefix makes ids sort by creation time; the 74 random bits make
them unguessable.
"""

import secrets
import time
from typing import Optional
from uuid import UUID

from taskboard.domain.ports.id_generator import IdGenerator
from taskboard.domain.value_objects.task_id import TaskId

_TIMESTAMP_MASK = (1 << 48) - 1
_RAND_B_MASK = (1 << 62) - 1


def uuid7(unix_ms: Optional[int] = None) -> UUID:
    if unix_ms is None:
        unix_ms = time.time_ns() // 1_000_000
    rand = secrets.randbits(74)
    rand_a = rand >> 62
    rand_b = rand & _RAND_B_MASK
    value = (
        (unix_ms & _TIMESTAMP_MASK) << 80
        | 0x7 << 76
        | rand_a << 64
        | 0b10 << 62
        | rand_b
    )
    return UUID(int=value)


class UuidV7Generator(IdGenerator):
    def new_id(self) -> TaskId:
        return TaskId(str(uuid7()))
