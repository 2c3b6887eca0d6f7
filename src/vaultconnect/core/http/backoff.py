from __future__ import annotations

import math
import random
from collections.abc import Iterator
from dataclasses import dataclass

_DEFAULT_RETRIES = 1
_DEFAULT_MIN_WAIT_S = 0.1
_DEFAULT_MAX_WAIT_S = 20.0
_MAX_EXPONENT = 64


@dataclass(frozen=True)
class BackoffSchedule:
    """Bounded exponential backoff.

    Iterating yields exactly ``max_attempts`` wait durations (seconds), one consumed
    before each retry. Every duration lies in ``[min_wait, max_wait]`` and the sequence
    never decreases. Each iteration starts a fresh sequence.
    """

    max_attempts: int = _DEFAULT_RETRIES
    min_wait: float = _DEFAULT_MIN_WAIT_S
    max_wait: float = _DEFAULT_MAX_WAIT_S
    base: float = 2.0
    jitter: float = 0.0

    def __post_init__(self) -> None:
        if self.max_attempts < 0:
            raise ValueError("max_attempts must be >= 0")
        if self.min_wait < 0 or self.max_wait < 0:
            raise ValueError("wait bounds must be >= 0")
        if self.min_wait > self.max_wait:
            raise ValueError("min_wait must be <= max_wait")
        if self.base < 1.0:
            raise ValueError("base must be >= 1.0")
        if self.jitter < 0:
            raise ValueError("jitter must be >= 0")

    def __iter__(self) -> Iterator[float]:
        if self.min_wait == 0:
            yield from (0.0 for _ in range(self.max_attempts))
            return
        previous = self.min_wait
        for attempt in range(self.max_attempts):
            if previous >= self.max_wait:
                yield self.max_wait
                continue
            try:
                growth = self.base ** min(attempt, _MAX_EXPONENT)
            except OverflowError:
                growth = math.inf
            duration = min(self.max_wait, self.min_wait * growth)
            if self.jitter:
                duration *= 1.0 + random.random() * self.jitter
            duration = min(self.max_wait, max(previous, duration))
            previous = duration
            yield duration

    def __len__(self) -> int:
        return self.max_attempts

    def durations(self) -> list[float]:
        return list(self)
