from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Mapping

from tasteapp.utils.validation import require_fields


@dataclass(slots=True)
class Track:
    id: str
    name: str
    artists: list[str] = field(default_factory=list)
    popularity: int | None = None
    album_name: str | None = None
    spotify_url: str | None = None

    def format(self) -> str:
        return f"{self.name} by {', '.join(self.artists)}"

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["artists"] = list(self.artists)
        return payload

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Track":
        """Build from a Spotify track object, keeping only artist names."""
        require_fields(data, ("id", "name"), what="track")
        artists = [a.get("name") for a in data.get("artists") or [] if a.get("name")]
        return cls(
            id=data["id"],
            name=data["name"],
            artists=artists,
            popularity=data.get("popularity"),
            album_name=(data.get("album") or {}).get("name"),
            spotify_url=(data.get("external_urls") or {}).get("spotify"),
        )
