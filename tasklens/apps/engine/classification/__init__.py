"""Keyword and pattern based classification of task descriptions."""

from .actions import get_suggested_actions
from .classifier import ClassificationResult, SuggestedActions, classify_task
from .detectors import detect_category, detect_priority
from .entities import ExtractedEntities, extract_entities

__all__ = [
    "ClassificationResult",
    "ExtractedEntities",
    "SuggestedActions",
    "classify_task",
    "detect_category",
    "detect_priority",
    "extract_entities",
    "get_suggested_actions",
]
