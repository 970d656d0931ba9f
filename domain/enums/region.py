"""Region enumeration for League of Legends servers."""
from dataclasses import dataclass
from enum import Enum

from ..errors import UnsupportedRegionError


@dataclass(frozen=True)
class RegionRouting:
    """Routing strings for one region.

    - regional: routing host for account and match APIs (e.g., europe)
    - platform: platform host for summoner and league APIs (e.g., euw1)
    - site_code: region segment used by op.gg profile URLs (e.g., euw)
    """

    regional: str
    platform: str
    site_code: str


class Region(Enum):
    """Supported regions, keyed by the short code players type."""

    # Europe
    EUW = RegionRouting("europe", "euw1", "euw")
    EUNE = RegionRouting("europe", "eun1", "eune")
    TR = RegionRouting("europe", "tr1", "tr")

    # Americas
    NA = RegionRouting("americas", "na1", "na")
    LAN = RegionRouting("americas", "la1", "lan")
    LAS = RegionRouting("americas", "la2", "las")
    BR = RegionRouting("americas", "br1", "br")

    # Asia
    JP = RegionRouting("asia", "jp1", "jp")
    KR = RegionRouting("asia", "kr", "kr")

    # SEA & Oceania
    OCE = RegionRouting("sea", "oc1", "oce")

    @property
    def routing(self) -> RegionRouting:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> 'Region':
        """Look up a region by its short code, case-insensitively."""
        try:
            return cls[(code or "").strip().upper()]
        except KeyError:
            raise UnsupportedRegionError(code) from None
