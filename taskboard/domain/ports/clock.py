"""
Clock Port - source of the current UTC time.
Implementation: taskboard/infrastructure/clock.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...
