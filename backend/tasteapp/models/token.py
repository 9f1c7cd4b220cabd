from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Mapping

from tasteapp.errors import DecodeError
from tasteapp.utils.validation import require_fields


@dataclass(frozen=True, slots=True)
class Token:
    access_token: str
    expires_at: float
    token_type: str = "Bearer"
    scope: str | None = None
    # kept for completeness; expired tokens are replaced by logging in again
    refresh_token: str | None = None

    def is_expired(self, now: float | None = None, leeway: float = 0.0) -> bool:
        now = time.time() if now is None else now
        return now >= self.expires_at - leeway

    def expires_in(self, now: float | None = None) -> int:
        now = time.time() if now is None else now
        return max(0, int(self.expires_at - now))

    @classmethod
    def from_token_response(cls, payload: Mapping[str, Any], now: float | None = None) -> "Token":
        require_fields(payload, ("access_token", "expires_in"), what="token response")
        try:
            expires_in = float(payload["expires_in"])
        except (TypeError, ValueError):
            raise DecodeError("Token response has a non-numeric expires_in") from None

        now = time.time() if now is None else now
        return cls(
            access_token=payload["access_token"],
            expires_at=now + expires_in,
            token_type=payload.get("token_type") or "Bearer",
            scope=payload.get("scope"),
            refresh_token=payload.get("refresh_token"),
        )
