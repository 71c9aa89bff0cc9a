"""Field Rules — pure predicates for presence, length, range, membership and formats.

Invariants:
    - All functions are PURE: no IO, no state, return bool
    - Presence ignores surrounding whitespace
    - Length is measured in characters, not bytes
    - Ranges are inclusive; NaN is never in range
    - Format checks match the whole string (fullmatch), ASCII digits only

Design Decisions:
    - Regexes compiled once at import: predicates stay allocation-free per call
    - is_url_or_blob is deliberately lax (any non-empty string passes);
      tightening it would reject images clients already send
"""

import re
from collections.abc import Iterable


_E164_PATTERN = re.compile(r"\+?[1-9][0-9]{1,14}")
_TIME_OF_DAY_PATTERN = re.compile(r"(2[0-3]|[01]?[0-9]):[0-5][0-9]")


def is_present(value: str | None) -> bool:
    """True when value has at least one non-whitespace character."""
    return value is not None and len(value.strip()) > 0


def is_within_length(value: str, max_length: int) -> bool:
    return len(value) <= max_length


def has_exact_length(value: str, length: int) -> bool:
    """Length check on the trimmed value."""
    return len(value.strip()) == length


def is_within_range(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def is_positive(value: float) -> bool:
    return value > 0


def is_non_negative(value: float) -> bool:
    return value >= 0


def is_one_of(value: str, allowed: Iterable[str]) -> bool:
    """Case-sensitive exact membership."""
    return any(value == option for option in allowed)


def is_e164(phone: str) -> bool:
    """Optional '+', first digit 1-9, 2-15 digits in total."""
    return _E164_PATTERN.fullmatch(phone) is not None


def is_time_of_day(value: str) -> bool:
    """H:MM or HH:MM, hour 0-23, minute 00-59."""
    return _TIME_OF_DAY_PATTERN.fullmatch(value) is not None


def is_url_or_blob(value: str) -> bool:
    """http(s) URL or any other non-empty string (base64 is not decoded)."""
    return value.startswith("http") or len(value) > 0
