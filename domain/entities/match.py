"""Win/loss tally over a window of recent matches."""
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class MatchOutcomeTally:
    """Wins and losses counted from the matches that could be attributed."""

    wins: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[Optional[bool]]) -> 'MatchOutcomeTally':
        """Merge per-match outcomes.

        ``True`` is a win, ``False`` a loss and ``None`` a match that could not
        be fetched or did not include the player; ``None`` counts as neither.
        """
        wins = losses = 0
        for outcome in outcomes:
            if outcome is True:
                wins += 1
            elif outcome is False:
                losses += 1
        return cls(wins=wins, losses=losses)
