"""Normalization of free-text city input for transport."""

from urllib.parse import quote


def normalize_city(raw: str) -> str | None:
    """Trim and percent-encode a city name.

    Returns None when nothing but whitespace was entered. Every character
    outside the unreserved URL set is encoded, so the result can be placed
    in a query string as-is.
    """
    trimmed = raw.strip()
    if not trimmed:
        return None
    return quote(trimmed, safe="")
