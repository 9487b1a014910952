"""The scoreboard: timer, scores and level instructions."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional

from bootkick.score import Score
from bootkick.timer import Timer

WIDTH = 380
HEIGHT = 175

MINUTE = 60
HALF_MINUTE = 30

DEFAULT_COLOR = (24, 69, 59)
MINUTE_WARNING_COLOR = (201, 128, 4)
HALF_MINUTE_WARNING_COLOR = (171, 25, 27)

SPACING_SCORES_TO_INSTRUCTIONS = 40
SPACING_INSTRUCTION_LINES = 17


def _to_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


class Scoreboard:
    """Shows the remaining time, the level and game scores and the goal text.

    Loading a scoreboard also sets the good and bad kick amounts on ``score``.
    """

    def __init__(self, score: Optional[Score] = None, timer: Optional[Timer] = None) -> None:
        self.score = score if score is not None else Score()
        self.timer = timer if timer is not None else Timer()
        self.x = 700
        self.y = 40
        self.goal_text = ""
        self.time_bonus = 0
        self.hours = 0
        self.minutes = 0
        self.seconds = 0

    def load(self, element: ET.Element) -> None:
        """Read position, kick scores and instructions from a ``<scoreboard>`` element."""
        self.x = _to_int(element.get("x", "700"), self.x)
        self.y = _to_int(element.get("y", "40"), self.y)
        self.score.good_score = _to_int(element.get("good", "10"), 10)
        self.score.bad_score = _to_int(element.get("bad", "0"), 0)

        parts = [element.text or ""]
        for child in element:
            if child.tag == "br":
                parts.append("\n")
            parts.append(child.tail or "")
        self.goal_text += "".join(parts)

    def update(self, elapsed: float) -> None:
        """Refresh the displayed hours, minutes and seconds from the timer."""
        remaining = int(self.timer.remaining_time)
        self.hours = remaining // 3600
        self.minutes = (remaining % 3600) // 60
        self.seconds = remaining % 60

    def time_text(self) -> str:
        """The remaining time as ``HH:MM:SS``."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def timer_warning(self) -> tuple[int, int, int]:
        """RGB color of the timer text, warmer as time runs out."""
        remaining = self.timer.remaining_time
        if remaining < HALF_MINUTE:
            return HALF_MINUTE_WARNING_COLOR
        if remaining < MINUTE:
            return MINUTE_WARNING_COLOR
        return DEFAULT_COLOR

    def instruction_lines(self) -> list[str]:
        """The goal text split into display lines."""
        lines = self.goal_text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    @property
    def level_text(self) -> str:
        """Label showing the level score."""
        return f"Level: {self.score.level_score}"

    @property
    def game_text(self) -> str:
        """Label showing the game score."""
        return f"Game: {self.score.game_score}"

    @property
    def bonus_text(self) -> str:
        """Label showing the time bonus."""
        return f"Time Bonus: {self.time_bonus}"