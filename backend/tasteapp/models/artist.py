from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Mapping

from tasteapp.utils.text import normalize_genre
from tasteapp.utils.validation import require_fields


@dataclass(slots=True)
class Artist:
    id: str
    name: str
    genres: list[str] = field(default_factory=list)
    popularity: int | None = None
    spotify_url: str | None = None
    image_url: str | None = None

    def has_genre(self, genre: str) -> bool:
        wanted = normalize_genre(genre)
        return any(normalize_genre(g) == wanted for g in self.genres)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["genres"] = list(self.genres)
        return payload

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Artist":
        """Build from a Spotify artist object."""
        require_fields(data, ("id", "name"), what="artist")
        images = data.get("images") or []
        return cls(
            id=data["id"],
            name=data["name"],
            genres=list(data.get("genres") or []),
            popularity=data.get("popularity"),
            spotify_url=(data.get("external_urls") or {}).get("spotify"),
            image_url=images[0].get("url") if images else None,
        )
