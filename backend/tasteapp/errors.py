from __future__ import annotations

from typing import Any, Iterable


class WorkshopError(Exception):
    """Base for every error that is turned into a JSON response."""

    status_code = 500
    code = "internal_error"
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message}


class ConfigurationError(WorkshopError):
    code = "configuration_missing"
    default_message = "Server configuration is incomplete"


class CommentaryDisabledError(WorkshopError):
    status_code = 503
    code = "commentary_disabled"
    default_message = "OPENAI_API_KEY is not set; commentary is disabled"


class NotAuthenticatedError(WorkshopError):
    status_code = 401
    code = "not_authenticated"
    default_message = "Not logged in to Spotify. Visit /login first."


class AuthorizationError(WorkshopError):
    status_code = 401
    code = "authorization_failed"
    default_message = "authorization failed"


class ValidationError(WorkshopError):
    """Raised when query parameters are invalid."""

    status_code = 400
    code = "invalid_request"
    default_message = "Invalid request"


class DecodeError(WorkshopError):
    status_code = 502
    code = "decode_failed"
    default_message = "Upstream response could not be decoded"


class UpstreamError(WorkshopError):
    code = "upstream_error"
    default_message = "Upstream request failed"

    def __init__(self, message: str | None = None, upstream_status: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        # an expired or revoked token upstream is still the caller's auth problem
        self.status_code = 401 if upstream_status == 401 else 502

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["upstream_status"] = self.upstream_status
        return payload


class GenreNotFoundError(WorkshopError):
    status_code = 404
    code = "genre_not_found"

    def __init__(self, genre: str, known_genres: Iterable[str]) -> None:
        self.genre = genre
        self.known_genres = list(known_genres)
        super().__init__(
            f"None of your top artists are tagged with the genre '{genre}'. "
            "Try one of the genres listed in known_genres."
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["genre"] = self.genre
        payload["known_genres"] = list(self.known_genres)
        return payload
