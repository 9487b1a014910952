"""SR flip-flop gate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from bootkick.pins import OutputPin, Point, State

WIDTH = 50
HEIGHT = 75


@dataclass(eq=False)
class _InputPin:
    """An input terminal of a gate, driven by a connected output pin."""

    owner: Any
    location: Point
    state: State = State.UNKNOWN
    source: Optional[OutputPin] = None


class SrFlipFlopGate:
    """Set/reset flip-flop with inputs S and R and outputs Q and Q'."""

    width = WIDTH
    height = HEIGHT

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        half_w = WIDTH // 2
        quarter_h = HEIGHT // 4
        self.input_a = _InputPin(self, (-half_w, -quarter_h))
        self.input_b = _InputPin(self, (-half_w, quarter_h))
        self.output_a = OutputPin(self, (half_w, -quarter_h))
        self.output_b = OutputPin(self, (half_w, quarter_h))
        self.output_a.state = State.ZERO
        self.output_b.state = State.ONE

    def set_location(self, x: float, y: float) -> None:
        """Move the gate centre to ``(x, y)``."""
        self.x = x
        self.y = y

    def compute_output(self) -> None:
        """Set Q and Q' from S and R; both high is invalid, both low holds."""
        s = self.input_a.state
        r = self.input_b.state
        if s is State.ONE and r is State.ONE:
            self.output_a.state = State.UNKNOWN
            self.output_b.state = State.UNKNOWN
        elif s is State.ONE:
            self.output_a.state = State.ONE
            self.output_b.state = State.ZERO
        elif r is State.ONE:
            self.output_a.state = State.ZERO
            self.output_b.state = State.ONE

    def update(self, elapsed: float) -> None:
        """Propagate the current outputs, then recompute them."""
        self.output_a.update()
        self.output_b.update()
        self.compute_output()

    def hit_test(self, x: float, y: float) -> bool:
        """Whether ``(x, y)`` lies within the gate's body."""
        return abs(x - self.x) <= WIDTH / 2 and abs(y - self.y) <= HEIGHT / 2

    def hit_draggable(self, x: float, y: float) -> Optional[OutputPin]:
        """The output pin at ``(x, y)``, or None."""
        for pin in (self.output_a, self.output_b):
            if pin.hit_test(x, y):
                return pin
        return None