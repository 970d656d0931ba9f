"""Rank tier enumeration."""
from enum import Enum
from typing import Optional


class Rank(Enum):
    """League of Legends rank tiers."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def display_name(self) -> str:
        """Tier as shown on the board, e.g. ``Gold``."""
        return self.value.capitalize()

    @classmethod
    def from_string(cls, rank_str: str) -> Optional['Rank']:
        """Create Rank from string, or None for an unknown tier."""
        try:
            return cls[(rank_str or "").upper()]
        except KeyError:
            return None


def tier_label(tier: str, division: str) -> str:
    """Format a league entry's tier and division, e.g. ``Gold II``."""
    known = Rank.from_string(tier)
    name = known.display_name if known else (tier[:1] + tier[1:].lower() if tier else tier)
    return f"{name} {division}".strip()
