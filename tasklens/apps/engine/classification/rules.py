"""Keyword and pattern tables for task description classification.

Precedence lives in tuple order: detectors walk the rule tuples front to back
and the first rule whose keywords appear in the text wins.
"""

from __future__ import annotations

import re
from typing import Dict, Literal, Tuple

Category = Literal["scheduling", "finance", "technical", "safety", "general"]
Priority = Literal["high", "medium", "low"]

DEFAULT_CATEGORY: Category = "general"
DEFAULT_PRIORITY: Priority = "low"

# Reorder to change category tie-breaking.
CATEGORY_RULES: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    ("scheduling", ("meeting", "schedule", "call", "appointment", "deadline")),
    ("finance", ("payment", "invoice", "bill", "budget", "cost", "expense")),
    ("technical", ("bug", "fix", "error", "install", "repair", "maintain")),
    ("safety", ("safety", "hazard", "inspection", "compliance", "ppe")),
)

# High wins over medium; low has no keywords.
PRIORITY_RULES: Tuple[Tuple[Priority, Tuple[str, ...]], ...] = (
    ("high", ("urgent", "asap", "immediately", "today", "critical", "emergency")),
    ("medium", ("soon", "this week", "important")),
)

SUGGESTED_ACTIONS_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    "scheduling": ("Block calendar", "Send invite", "Prepare agenda", "Set reminder"),
    "finance": ("Check budget", "Get approval", "Generate invoice", "Update records"),
    "technical": ("Diagnose issue", "Check resources", "Assign technician", "Document fix"),
    "safety": ("Conduct inspection", "File report", "Notify supervisor", "Update checklist"),
}

DATE_TOKENS: Tuple[str, ...] = ("today", "tomorrow")

ACTION_VERBS: Tuple[str, ...] = (
    "call", "meet", "schedule", "book", "send", "prepare", "review",
    "pay", "invoice", "approve", "update", "define", "check",
    "debug", "built", "solve", "implement", "improve",
    "fix", "install", "repair", "maintain", "diagnose", "document",
    "inspect", "audit", "notify", "file", "led", "direct", "plan",
)

# ASCII keeps \d, \w and \b to ASCII word characters. Whitespace is spelled
# out instead of \s: ASCII blanks plus no-break, ideographic and other
# Unicode space separators, the line/paragraph separators and U+FEFF.
_WS = r"[\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
# Same set as _WS, for trimming matches and normalizing input.
WHITESPACE_CHARS = " \t\n\r\f\v\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff" + "".join(
    chr(code) for code in range(0x2000, 0x200B)
)

ISO_DATE_RE = re.compile(r"\b\d{4}[-/]\d{2}[-/]\d{2}\b", re.ASCII)
DMY_DATE_RE = re.compile(r"\b\d{1,2}[-/]\d{1,2}[-/]\d{4}\b", re.ASCII)
TIME_RE = re.compile(
    rf"\b(\d{{1,2}}:\d{{2}}{_WS}?(am|pm)?)\b|\b(\d{{1,2}}{_WS}?(am|pm))\b",
    re.ASCII | re.IGNORECASE,
)

_HONORIFIC = rf"(?:Dr\.?|Mr\.?|Ms\.?|Mrs\.?|Prof\.?|Sir|Madam){_WS}+"
_NAME_PART = r"[A-Z][a-z]+"
# Two to four name parts: "Emily Smith" .. "Emily Jane Ann Smith".
_FULL_NAME = rf"(?:{_HONORIFIC})?({_NAME_PART}(?:{_WS}+{_NAME_PART}){{1,3}})"

PERSON_PATTERNS: Tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\b{trigger}{_WS}+{_FULL_NAME}\b", re.ASCII)
    for trigger in ("with", "by", f"assign{_WS}+to", f"Assign{_WS}+to")
)

LOCATION_PATTERNS: Tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\b{trigger}{_WS}+([A-Z]\w+(?:{_WS}+[A-Z]\w+){{0,4}})\b", re.ASCII)
    for trigger in ("at", "in", "on")
)


__all__ = [
    "ACTION_VERBS",
    "CATEGORY_RULES",
    "Category",
    "DATE_TOKENS",
    "DEFAULT_CATEGORY",
    "DEFAULT_PRIORITY",
    "DMY_DATE_RE",
    "ISO_DATE_RE",
    "LOCATION_PATTERNS",
    "PERSON_PATTERNS",
    "PRIORITY_RULES",
    "Priority",
    "SUGGESTED_ACTIONS_BY_CATEGORY",
    "TIME_RE",
    "WHITESPACE_CHARS",
]
