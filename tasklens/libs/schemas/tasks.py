"""Task payload schemas shared by the API and enrichment service."""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

CategoryName = Literal["scheduling", "finance", "technical", "safety", "general"]
PriorityName = Literal["high", "medium", "low"]
TaskStatus = Literal["pending", "in_progress", "completed"]


class TaskCreate(BaseModel):
    """Task creation payload; classification fields are optional overrides.

    Unknown keys are kept so they reach the record store untouched.
    """

    model_config = ConfigDict(extra="allow")

    title: str = Field(min_length=1)
    description: str | None = None
    category: CategoryName | None = None
    priority: PriorityName | None = None
    status: TaskStatus | None = None
    assigned_to: str | None = None
    due_date: str | None = None
    extracted_entities: Dict[str, Any] | None = None
    suggested_actions: Dict[str, Any] | None = None


class ExtractedEntitiesPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dates: List[str] = Field(default_factory=list)
    people: List[str] = Field(default_factory=list)
    locations: List[str] = Field(default_factory=list)
    action_verbs: List[str] = Field(default_factory=list, alias="actionVerbs")


class SuggestedActionsPayload(BaseModel):
    category: CategoryName
    actions: List[str] = Field(default_factory=list)


class ClassificationPayload(BaseModel):
    """Wire shape of a classification preview."""

    category: CategoryName
    priority: PriorityName
    extracted_entities: ExtractedEntitiesPayload
    suggested_actions: SuggestedActionsPayload


__all__ = [
    "CategoryName",
    "ClassificationPayload",
    "ExtractedEntitiesPayload",
    "PriorityName",
    "SuggestedActionsPayload",
    "TaskCreate",
    "TaskStatus",
]
