import pytest
from pydantic import ValidationError

from tasklens.apps.api.services.tasks import enrich_task
from tasklens.libs.schemas import TaskCreate

FINANCE_ACTIONS = ["Check budget", "Get approval", "Generate invoice", "Update records"]


def test_description_fills_missing_fields():
    task = enrich_task({"title": "Vendor", "description": "Pay the invoice ASAP"})

    assert task["category"] == "finance"
    assert task["priority"] == "high"
    assert task["status"] == "pending"
    assert task["extracted_entities"]["actionVerbs"] == ["pay", "invoice"]
    assert task["suggested_actions"] == {"category": "finance", "actions": FINANCE_ACTIONS}


def test_caller_values_win_per_field():
    task = enrich_task(
        {
            "title": "Vendor",
            "description": "Pay the invoice ASAP",
            "category": "safety",
            "status": "in_progress",
            "extracted_entities": {"people": ["Someone"]},
        }
    )

    assert task["category"] == "safety"
    assert task["status"] == "in_progress"
    assert task["extracted_entities"] == {"people": ["Someone"]}
    # Unsupplied fields still come from the description.
    assert task["priority"] == "high"
    assert task["suggested_actions"]["category"] == "finance"


def test_without_description_only_defaults_apply():
    task = enrich_task({"title": "Quiet task"})

    assert task["category"] == "general"
    assert task["priority"] == "low"
    assert task["status"] == "pending"
    assert task["extracted_entities"] is None
    assert task["suggested_actions"] is None


def test_accepts_model_and_leaves_input_untouched():
    payload = {"title": "Crew", "description": "Safety inspection this week"}
    model = TaskCreate(**payload)

    task = enrich_task(model)

    assert task["category"] == "safety"
    assert task["priority"] == "medium"
    assert payload == {"title": "Crew", "description": "Safety inspection this week"}
    assert model.category is None


@pytest.mark.parametrize(
    "payload",
    [
        {"description": "no title"},
        {"title": ""},
        {"title": "T", "priority": "urgent"},
        {"title": "T", "category": "misc"},
        {"title": "T", "status": "done"},
    ],
)
def test_invalid_payload_raises(payload):
    with pytest.raises(ValidationError):
        enrich_task(payload)


def test_unknown_fields_pass_through():
    task = enrich_task({"title": "Crew", "description": "Repair the pump", "site_code": "B7", "tags": ["ops"]})

    assert task["site_code"] == "B7"
    assert task["tags"] == ["ops"]
    assert task["category"] == "technical"
