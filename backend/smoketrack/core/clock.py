"""Clock Protocol - the only way core and services learn the current instant.

Invariants:
    - now() returns an aware UTC datetime
    - Implementations live in infrastructure/clock.py and are injected by the shell
"""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of true wall-clock time."""
    def now(self) -> datetime: ...
