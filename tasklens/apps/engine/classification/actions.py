from __future__ import annotations

from typing import Any, Tuple

from .rules import SUGGESTED_ACTIONS_BY_CATEGORY


def get_suggested_actions(category: Any) -> Tuple[str, ...]:
    """Canned next steps for ``category``; empty for ``general`` or unknown input."""

    if not isinstance(category, str):
        return ()
    return SUGGESTED_ACTIONS_BY_CATEGORY.get(category, ())


__all__ = ["get_suggested_actions"]
