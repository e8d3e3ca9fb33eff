"""
Domain models and value objects.

Contains the music disk record and the ordered collection that owns them.
"""

from src.core.domain.music_collection import MusicCollection
from src.core.domain.music_disk import (
    CURRENCY_SYMBOL,
    PRICE_QUANTUM,
    MusicDisk,
    format_price,
)

__all__ = [
    # Music disk model
    "CURRENCY_SYMBOL",
    "PRICE_QUANTUM",
    "MusicDisk",
    "format_price",
    # Collection
    "MusicCollection",
]
