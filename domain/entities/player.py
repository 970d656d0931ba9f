"""Player identity and resolved account."""
from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerIdentity:
    """Riot ID plus the region code it is looked up in."""

    game_name: str
    tag_line: str
    region: str

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


@dataclass(frozen=True)
class AccountRecord:
    """Account resolved from a Riot ID; lives for one cycle."""

    puuid: str
    game_name: str
    tag_line: str

    @classmethod
    def from_api(cls, data: dict) -> 'AccountRecord':
        return cls(
            puuid=data['puuid'],
            game_name=data.get('gameName', ''),
            tag_line=data.get('tagLine', ''),
        )
