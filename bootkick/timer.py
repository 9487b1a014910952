"""Countdown timer for a level."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_START_TIME = 120.0


@dataclass
class Timer:
    """Counts the remaining level time down in whole seconds.

    ``remaining_time`` starts at ``start_time`` unless given. ``reset``
    always returns to ``start_time``.
    """

    remaining_time: float | None = None
    start_time: float = DEFAULT_START_TIME
    _accumulated: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.remaining_time is None:
            self.remaining_time = self.start_time

    def update(self, elapsed: float) -> None:
        """Advance the timer by ``elapsed`` seconds, ticking once per full second."""
        if self.remaining_time > 0:
            self._accumulated += elapsed
        while self._accumulated >= 1.0:
            self.remaining_time -= 1.0
            self._accumulated -= 1.0
        if self.remaining_time <= 0:
            self.remaining_time = 0

    def reset(self) -> None:
        """Restore the remaining time to the start time."""
        self.remaining_time = self.start_time