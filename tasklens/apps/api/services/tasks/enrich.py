from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from tasklens.apps.engine.classification import classify_task
from tasklens.libs.schemas.tasks import TaskCreate

LOGGER = logging.getLogger(__name__)

ENRICHED_FIELDS = ("category", "priority", "extracted_entities", "suggested_actions")

TASK_DEFAULTS: Dict[str, str] = {
    "status": "pending",
    "category": "general",
    "priority": "low",
}


def enrich_task(payload: TaskCreate | Mapping[str, Any]) -> Dict[str, Any]:
    """Fill classification fields the caller left empty, then apply task defaults.

    Caller-supplied values always win, field by field. The classifier only runs
    when a description is present. Mappings are validated through
    :class:`TaskCreate` and may raise ``pydantic.ValidationError``.
    """

    task = payload if isinstance(payload, TaskCreate) else TaskCreate.model_validate(dict(payload))
    data = task.model_dump()

    if task.description:
        enrichment = classify_task(task.description).to_dict()
        filled = [name for name in ENRICHED_FIELDS if not data.get(name)]
        for name in filled:
            data[name] = enrichment[name]
        LOGGER.debug("Enriched task from description", extra={"filled_fields": filled})

    for name, default in TASK_DEFAULTS.items():
        if not data.get(name):
            data[name] = default
    return data


__all__ = ["ENRICHED_FIELDS", "TASK_DEFAULTS", "enrich_task"]
