"""Number of worker threads used by the proof-of-work search."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _available_cores() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class Cores:
    """A core count, capped at the number of available CPUs."""

    count: int

    def __post_init__(self) -> None:
        count = int(self.count)
        if count < 0:
            raise ValueError(f"core count must not be negative: {count}")
        object.__setattr__(self, "count", min(count, _available_cores()))

    @classmethod
    def max(cls) -> Cores:
        """All available CPUs."""
        return cls(_available_cores())

    def __int__(self) -> int:
        return self.count

    def __index__(self) -> int:
        return self.count