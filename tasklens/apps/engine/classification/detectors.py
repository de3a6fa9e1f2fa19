from __future__ import annotations

from typing import Any, Iterable, Tuple, TypeVar

from .rules import (
    CATEGORY_RULES,
    DEFAULT_CATEGORY,
    DEFAULT_PRIORITY,
    PRIORITY_RULES,
    Category,
    Priority,
    WHITESPACE_CHARS,
)

T = TypeVar("T")


def coerce_text(text: Any) -> str:
    return str(text or "")


def normalize_text(text: Any) -> str:
    return coerce_text(text).lower().strip(WHITESPACE_CHARS)


def first_match(text: str, rules: Iterable[Tuple[T, Tuple[str, ...]]], default: T) -> T:
    """Return the result of the first rule with a keyword inside ``text``."""

    for result, keywords in rules:
        if any(keyword in text for keyword in keywords):
            return result
    return default


def detect_category(text: Any = "") -> Category:
    t = normalize_text(text)
    if not t:
        return DEFAULT_CATEGORY
    return first_match(t, CATEGORY_RULES, DEFAULT_CATEGORY)


def detect_priority(text: Any = "") -> Priority:
    t = normalize_text(text)
    if not t:
        return DEFAULT_PRIORITY
    return first_match(t, PRIORITY_RULES, DEFAULT_PRIORITY)


__all__ = ["coerce_text", "detect_category", "detect_priority", "first_match", "normalize_text"]
