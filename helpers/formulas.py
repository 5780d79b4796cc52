"""Pure math formulas - no state, easily testable."""
import re
from datetime import date

import numpy as np

from app.errors import InvalidInputError

STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "for", "to", "of", "in", "on", "at",
    "by", "from", "with", "as", "is", "was", "are", "be", "been", "being",
    "that", "this", "it", "its", "not", "no", "all", "any", "each", "which",
})

_NON_ALPHA = re.compile(r"[^a-z\s]")
_VOWEL_GROUPS = re.compile(r"[aeiouy]+")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return min(max(value, low), high)


def weighted_average(values: list[float], weights: list[float]) -> float:
    """Weighted mean. Rejects mismatched lengths and zero total weight."""
    if len(values) != len(weights) or not values:
        raise InvalidInputError("Values and weights must have the same non-zero length")

    w = np.asarray(weights, dtype=float)
    total = float(w.sum())
    if total == 0:
        raise InvalidInputError("Total weight cannot be zero")

    return float(np.dot(np.asarray(values, dtype=float), w)) / total


def mean(values: list[float]) -> float:
    """Arithmetic mean, 0.0 for empty input."""
    return sum(values) / len(values) if values else 0.0


def extract_keywords(title: str) -> list[str]:
    """Lower-cased alphabetic title tokens longer than 2 chars, stop words removed."""
    cleaned = _NON_ALPHA.sub("", title.lower())
    return [w for w in cleaned.split() if len(w) > 2 and w not in STOP_WORDS]


def keyword_overlap(a: list[str], b: list[str]) -> float:
    """Share of keywords of `a` found in `b`, over the longer list."""
    other = set(b)
    overlap = sum(1 for w in a if w in other)
    return overlap / max(len(a), len(b), 1)


def count_syllables(text: str) -> int:
    """Vowel-group syllable heuristic, silent trailing e, minimum 1 per word."""
    total = 0
    for word in text.lower().split():
        cleaned = re.sub(r"[^a-z]", "", word)
        if not cleaned:
            continue

        syllables = len(_VOWEL_GROUPS.findall(cleaned))
        if cleaned.endswith("e") and syllables > 1:
            syllables -= 1
        total += max(1, syllables)

    return total


def flesch_reading_ease(text: str) -> float:
    """Flesch reading ease clamped to 0-100 (higher = easier)."""
    words = text.split()
    sentences = [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]

    avg_sentence = len(words) / max(len(sentences), 1)
    avg_syllables = count_syllables(text) / max(len(words), 1)

    return clamp(206.835 - 1.015 * avg_sentence - 84.6 * avg_syllables, 0.0, 100.0)


def add_months(d: date, months: int) -> date:
    """Shift a date by whole months, pinning the day to the target month's length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1

    next_month = date(year + (month == 12), month % 12 + 1, 1)
    last_day = (next_month - date(year, month, 1)).days
    return date(year, month, min(d.day, last_day))


def is_presidential_year(year: int) -> bool:
    """US presidential general elections fall on years divisible by 4."""
    return year % 4 == 0
