"""Canned payload served for ``?debug=1``."""
from domain.entities import LeaderboardEntry

DEBUG_ENTRIES = (
    LeaderboardEntry(
        id="self",
        rank=1,
        avatar_url="https://ddragon.leagueoflegends.com/cdn/14.20.1/img/profileicon/29.png",
        game_name="wot m9 i go afk",
        tag_line="EUW",
        tier="Gold II",
        lp=47,
        wins=6,
        losses=4,
        opgg_url="https://www.op.gg/summoners/euw/wot%20m9%20i%20go%20afk-EUW",
    ),
)


def debug_payload() -> list:
    return [entry.to_dict() for entry in DEBUG_ENTRIES]
