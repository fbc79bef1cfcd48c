"""Text helpers for day-card descriptions and temperatures."""

import math


def capitalize_each_word(sentence: object) -> str:
    """Uppercase the first character of every space-separated word.

    Empty segments from repeated spaces are kept in place. Anything that is
    not a string, or is blank, yields "".
    """
    if not isinstance(sentence, str) or not sentence.strip():
        return ""
    words = sentence.split(" ")
    return " ".join(w[:1].upper() + w[1:] if w else "" for w in words)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)
