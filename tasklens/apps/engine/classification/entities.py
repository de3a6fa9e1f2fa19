"""Heuristic entity extraction from task descriptions.

Dates and times, people and locations are collected as unique values in
first-seen order. People and locations come from capitalised phrases after
trigger words, so the same span can land in both lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from .detectors import coerce_text, normalize_text
from .rules import (
    ACTION_VERBS,
    DATE_TOKENS,
    DMY_DATE_RE,
    ISO_DATE_RE,
    LOCATION_PATTERNS,
    PERSON_PATTERNS,
    TIME_RE,
    WHITESPACE_CHARS,
)


@dataclass(frozen=True, slots=True)
class ExtractedEntities:
    dates: Tuple[str, ...] = ()
    people: Tuple[str, ...] = ()
    locations: Tuple[str, ...] = ()
    action_verbs: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "dates": list(self.dates),
            "people": list(self.people),
            "locations": list(self.locations),
            "actionVerbs": list(self.action_verbs),
        }


class _UniqueValues:
    """Insertion-ordered set backed by dict keys."""

    __slots__ = ("_seen",)

    def __init__(self) -> None:
        self._seen: Dict[str, None] = {}

    def add(self, value: str) -> None:
        self._seen.setdefault(value, None)

    def extend(self, values: Iterable[str]) -> None:
        for value in values:
            self.add(value)

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(self._seen)


def _extract_dates(raw: str, normalized: str) -> Tuple[str, ...]:
    dates = _UniqueValues()
    dates.extend(token for token in DATE_TOKENS if token in normalized)
    dates.extend(match.group(0) for match in ISO_DATE_RE.finditer(raw))
    dates.extend(match.group(0) for match in DMY_DATE_RE.finditer(raw))
    dates.extend(match.group(0).strip(WHITESPACE_CHARS) for match in TIME_RE.finditer(raw))
    return dates.as_tuple()


def _extract_captures(raw: str, patterns: Iterable[Any]) -> Tuple[str, ...]:
    found = _UniqueValues()
    for pattern in patterns:
        found.extend(match.group(1).strip(WHITESPACE_CHARS) for match in pattern.finditer(raw))
    return found.as_tuple()


def _extract_action_verbs(normalized: str) -> Tuple[str, ...]:
    return tuple(verb for verb in ACTION_VERBS if verb in normalized)


def extract_entities(text: Any = "") -> ExtractedEntities:
    raw = coerce_text(text)
    normalized = normalize_text(raw)
    if not normalized:
        return ExtractedEntities()

    return ExtractedEntities(
        dates=_extract_dates(raw, normalized),
        people=_extract_captures(raw, PERSON_PATTERNS),
        locations=_extract_captures(raw, LOCATION_PATTERNS),
        action_verbs=_extract_action_verbs(normalized),
    )


__all__ = ["ExtractedEntities", "extract_entities"]
