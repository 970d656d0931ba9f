"""Domain enumerations."""
from .region import Region, RegionRouting
from .queue_type import QueueType
from .rank import Rank, tier_label

__all__ = [
    'Region',
    'RegionRouting',
    'QueueType',
    'Rank',
    'tier_label',
]
