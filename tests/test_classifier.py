import dataclasses

import pytest

from tasklens.apps.engine.classification import ClassificationResult, classify_task


def test_empty_description_uses_defaults():
    assert classify_task("").to_dict() == {
        "category": "general",
        "priority": "low",
        "extracted_entities": {"dates": [], "people": [], "locations": [], "actionVerbs": []},
        "suggested_actions": {"category": "general", "actions": []},
    }


def test_none_description_matches_empty():
    assert classify_task(None) == classify_task("")


def test_full_enrichment():
    result = classify_task("Schedule a meeting with John Doe today at Site Office 2pm")

    assert result.to_dict() == {
        "category": "scheduling",
        "priority": "high",
        "extracted_entities": {
            "dates": ["today", "2pm"],
            "people": ["John Doe"],
            "locations": ["Site Office"],
            "actionVerbs": ["meet", "schedule"],
        },
        "suggested_actions": {
            "category": "scheduling",
            "actions": ["Block calendar", "Send invite", "Prepare agenda", "Set reminder"],
        },
    }


def test_detectors_run_independently():
    result = classify_task("Pay the invoice ASAP")

    assert result.category == "finance"
    assert result.priority == "high"
    assert result.extracted_entities.action_verbs == ("pay", "invoice")


@pytest.mark.parametrize(
    "description",
    ["Fix the bug then call the vendor", "Inspect scaffolding with Dr. Ann Lee on Monday", "", "((["],
)
def test_classification_is_deterministic(description):
    assert classify_task(description) == classify_task(description)
    assert classify_task(description).to_dict() == classify_task(description).to_dict()


def test_result_is_immutable():
    result = classify_task("Repair the pump")

    assert isinstance(result, ClassificationResult)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.category = "safety"
