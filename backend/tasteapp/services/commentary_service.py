from __future__ import annotations

from typing import Iterable

from flask import current_app
from openai import OpenAI, OpenAIError

from tasteapp.errors import CommentaryDisabledError, UpstreamError
from tasteapp.models.track import Track

DEFAULT_CELEBRITY = "Gordon Ramsay"
DEFAULT_TRACK_LIMIT = 5


def build_prompt(
    tracks: Iterable[Track],
    roast: bool = True,
    celebrity: str = DEFAULT_CELEBRITY,
    track_limit: int = DEFAULT_TRACK_LIMIT,
) -> str:
    """
    Build the roast/toast prompt from the first `track_limit` tracks.

    Tracks are listed as "1. Name by Artist A, Artist B".
    """
    track_lines = [
        f"{i}. {track.format()}"
        for i, track in enumerate(list(tracks)[:track_limit], start=1)
    ]
    action = "roast" if roast else "toast"
    return (
        f"Please write a one sentence {action} of my music taste in the style of {celebrity}. "
        "Reference the track, genre, and/or artist in the list as part of the sentence. "
        "The sentence must be complete and under 50 characters. Do not use hashtags. "
        "Here are my top tracks:\n" + "\n".join(track_lines)
    )


class CommentaryService:
    def __init__(self, api_key: str | None = None, model: str = "gpt-3.5-turbo", client: OpenAI | None = None) -> None:
        self.model = model
        # if no key, the service stays disabled and the page skips commentary
        self._client = client or (OpenAI(api_key=api_key) if api_key else None)

    @classmethod
    def from_app(cls) -> "CommentaryService":
        return cls(
            api_key=current_app.config.get("OPENAI_API_KEY"),
            model=current_app.config.get("OPENAI_MODEL") or "gpt-3.5-turbo",
        )

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def generate(
        self,
        tracks: Iterable[Track],
        roast: bool = True,
        celebrity: str = DEFAULT_CELEBRITY,
        track_limit: int = DEFAULT_TRACK_LIMIT,
    ) -> str:
        if self._client is None:
            raise CommentaryDisabledError()

        prompt = build_prompt(tracks, roast=roast, celebrity=celebrity, track_limit=track_limit)
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as exc:
            current_app.logger.warning("OpenAI commentary request failed: %s", exc)
            raise UpstreamError(f"OpenAI request failed: {exc}") from exc

        if not resp.choices:
            raise UpstreamError("OpenAI returned no choices")
        content = resp.choices[0].message.content
        if not content:
            raise UpstreamError("OpenAI returned an empty response")
        return content
