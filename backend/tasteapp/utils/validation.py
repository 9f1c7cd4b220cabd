from __future__ import annotations

from typing import Iterable, Mapping

from tasteapp.errors import DecodeError, ValidationError

TIME_RANGES = ("short_term", "medium_term", "long_term")
MAX_LIMIT = 50


def require_fields(payload: Mapping[str, object], fields: Iterable[str], what: str = "payload") -> None:
    if not isinstance(payload, Mapping):
        raise DecodeError(f"Expected a JSON object for {what}")
    missing = [field for field in fields if payload.get(field) in (None, "")]
    if missing:
        raise DecodeError(f"Missing required fields in {what}: {', '.join(missing)}")


def parse_limit(raw: str | int | None, default: int = MAX_LIMIT) -> int:
    if raw is None or raw == "":
        return default
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        raise ValidationError("`limit` must be an integer") from None
    if not 1 <= limit <= MAX_LIMIT:
        raise ValidationError(f"`limit` must be between 1 and {MAX_LIMIT}")
    return limit


def parse_time_range(raw: str | None, default: str = "medium_term") -> str:
    value = (raw or "").strip().lower() or default
    if value not in TIME_RANGES:
        raise ValidationError(f"`time_range` must be one of: {', '.join(TIME_RANGES)}")
    return value
