"""Entity id parsing.

Ids arrive from JSON bodies, query strings and URL paths. Anything that
cannot name an entity parses to None, so the lookup simply finds nothing.
"""

from __future__ import annotations


def parse_id(raw: object) -> int | None:
    """Coerce *raw* to an int id, or return None."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None
