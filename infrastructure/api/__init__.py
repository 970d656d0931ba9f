"""Infrastructure API module."""
from .riot_client import RiotAPIClient

__all__ = [
    'RiotAPIClient',
]
