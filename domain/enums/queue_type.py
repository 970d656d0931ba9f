"""Queue type enumeration for ranked matches."""
from enum import Enum


class QueueType(Enum):
    """Ranked queue types in League of Legends.

    Provides:
    - queue_id: numeric queue id for match filters
    - api_queue_name: string used by league endpoints
    """

    RANKED_SOLO_5x5 = 420  # Solo/Duo Queue

    @property
    def queue_id(self) -> int:
        """Get queue ID for API calls."""
        return self.value

    @property
    def api_queue_name(self) -> str:
        """Get queue name string used in /league endpoints."""
        return "RANKED_SOLO_5x5"
