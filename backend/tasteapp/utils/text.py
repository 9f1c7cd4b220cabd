from __future__ import annotations

import re

SEPARATOR_RE = re.compile(r"[\s_\-]+")


def normalize_genre(value: str) -> str:
    """Lowercase a genre and collapse dashes/underscores/whitespace to one space."""
    lowered = value.strip().lower()
    return SEPARATOR_RE.sub(" ", lowered).strip()
