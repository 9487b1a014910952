"""Level and game scores."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Score:
    """Running scores for the current level and the whole game.

    ``good_score`` and ``bad_score`` are the amounts a correct or a wrong
    kick adds to the level score; the scoreboard configures them.
    """

    level_score: int = 0
    game_score: int = 0
    good_score: int = 0
    bad_score: int = 0

    def add_level_score(self, amount: int) -> None:
        """Add ``amount`` to the level score."""
        self.level_score += amount

    def add_good(self) -> None:
        """Credit the level score for a correct action."""
        self.level_score += self.good_score

    def add_bad(self) -> None:
        """Charge the level score for a wrong action."""
        self.level_score += self.bad_score

    def reset_level(self) -> None:
        """Set the level score back to zero."""
        self.level_score = 0

    def reset_game(self) -> None:
        """Set the game score back to zero."""
        self.game_score = 0