from .artist import Artist
from .token import Token
from .track import Track

__all__ = [
    "Artist",
    "Token",
    "Track",
]
