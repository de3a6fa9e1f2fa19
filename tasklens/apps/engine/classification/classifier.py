from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .actions import get_suggested_actions
from .detectors import detect_category, detect_priority
from .entities import ExtractedEntities, extract_entities
from .rules import Category, Priority

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SuggestedActions:
    category: Category
    actions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "actions": list(self.actions)}


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    category: Category
    priority: Priority
    extracted_entities: ExtractedEntities
    suggested_actions: SuggestedActions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "priority": self.priority,
            "extracted_entities": self.extracted_entities.to_dict(),
            "suggested_actions": self.suggested_actions.to_dict(),
        }


def classify_task(description: Any = "") -> ClassificationResult:
    """Full enrichment for a task description.

    Category, priority and entities are derived independently from the same
    text; suggested actions follow the detected category.
    """

    category = detect_category(description)
    priority = detect_priority(description)
    entities = extract_entities(description)
    suggested = SuggestedActions(category=category, actions=get_suggested_actions(category))

    LOGGER.debug(
        "Classified task description",
        extra={"category": category, "priority": priority, "verbs": len(entities.action_verbs)},
    )
    return ClassificationResult(
        category=category,
        priority=priority,
        extracted_entities=entities,
        suggested_actions=suggested,
    )


__all__ = ["ClassificationResult", "SuggestedActions", "classify_task"]
