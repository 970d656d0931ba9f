"""Row returned by the leaderboard endpoint."""
from dataclasses import dataclass
from typing import Any, Dict

from .match import MatchOutcomeTally
from .player import AccountRecord
from .summoner import RankStanding


@dataclass(frozen=True)
class LeaderboardEntry:
    """One board row. Rebuilt from scratch every cycle."""

    id: str
    rank: int
    avatar_url: str
    game_name: str
    tag_line: str
    tier: str
    lp: int
    wins: int
    losses: int
    opgg_url: str

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @classmethod
    def assemble(
        cls,
        account: AccountRecord,
        avatar_url: str,
        standing: RankStanding,
        tally: MatchOutcomeTally,
        opgg_url: str,
        *,
        entry_id: str = "self",
        rank: int = 1,
    ) -> 'LeaderboardEntry':
        return cls(
            id=entry_id,
            rank=rank,
            avatar_url=avatar_url,
            game_name=account.game_name,
            tag_line=account.tag_line,
            tier=standing.tier_label,
            lp=standing.league_points,
            wins=tally.wins,
            losses=tally.losses,
            opgg_url=opgg_url,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape the presenters consume."""
        return {
            'id': self.id,
            'rank': self.rank,
            'avatarUrl': self.avatar_url,
            'gameName': self.game_name,
            'tagLine': self.tag_line,
            'tier': self.tier,
            'lp': self.lp,
            'games': self.games,
            'wins': self.wins,
            'losses': self.losses,
            'opggUrl': self.opgg_url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LeaderboardEntry':
        return cls(
            id=str(data.get('id', '')),
            rank=int(data.get('rank') or 0),
            avatar_url=data.get('avatarUrl') or '',
            game_name=data.get('gameName') or '',
            tag_line=data.get('tagLine') or '',
            tier=data.get('tier') or '',
            lp=int(data.get('lp') or 0),
            wins=int(data.get('wins') or 0),
            losses=int(data.get('losses') or 0),
            opgg_url=data.get('opggUrl') or '',
        )
