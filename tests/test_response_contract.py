"""Tests for validating and normalizing the classifier output."""

import json

import pytest

from babycry.pipelines.cry import CryAnalysisPipeline, normalize_response
from babycry.services.response_contract import ClassificationResult, ResponseContractError


def test_well_formed_json_is_returned_verbatim():
    body = {
        "is_baby_cry": True,
        "cause": "tiredness",
        "confidence": 64.5,
        "actions": ["Dim the lights", "Rock gently"],
        "message": "Sounds like an overtired cry.",
    }

    outcome = normalize_response(json.dumps(body))

    assert outcome.kind == "structured"
    assert outcome.reason is None
    assert outcome.to_payload() == body


def test_extra_fields_from_the_model_are_preserved():
    body = {"is_baby_cry": False, "cause": "none", "confidence": 90, "actions": [], "noise": "fan"}

    outcome = normalize_response(json.dumps(body))

    assert outcome.to_payload() == body


@pytest.mark.parametrize("text", ["I think the baby is hungry.", "", "```json\n{}\n```", "{'a': 1}"])
def test_non_json_text_becomes_raw(text):
    outcome = normalize_response(text)

    assert outcome.kind == "raw"
    assert outcome.reason == "invalid_json"
    assert outcome.to_payload() == {"raw": text}


@pytest.mark.parametrize(
    "body",
    [
        [1, 2, 3],
        {"is_baby_cry": "yes", "cause": "hunger", "confidence": 80, "actions": []},
        {"is_baby_cry": True, "cause": "hunger", "confidence": 180, "actions": []},
        {"is_baby_cry": True, "cause": "hunger", "confidence": 80},
        {"is_baby_cry": True, "confidence": 80, "actions": []},
    ],
)
def test_schema_mismatch_becomes_raw(body):
    text = json.dumps(body)

    outcome = normalize_response(text)

    assert outcome.kind == "raw"
    assert outcome.reason == "schema_mismatch"
    assert outcome.to_payload() == {"raw": text}


def test_from_json_reports_reason():
    with pytest.raises(ResponseContractError) as exc_info:
        ClassificationResult.from_json("not json")

    assert exc_info.value.reason == "invalid_json"


def test_pipeline_stages_are_ordered():
    stages = list(CryAnalysisPipeline.describe())

    assert [stage.order for stage in stages] == list(range(1, len(stages) + 1))
    assert stages[0].name == "Validate Input"
    assert stages[-1].name == "Respond"


def test_null_message_and_null_extra_fields_are_relayed_unchanged():
    body = {
        "is_baby_cry": False,
        "cause": "none",
        "confidence": 5,
        "actions": [],
        "message": None,
        "extra": None,
    }

    outcome = normalize_response(json.dumps(body))

    assert outcome.kind == "structured"
    assert outcome.to_payload() == body
    assert "message" in outcome.to_payload()


def test_integer_confidence_keeps_its_json_type():
    outcome = normalize_response(
        '{"is_baby_cry": true, "cause": "hunger", "confidence": 87, "actions": ["Feed"]}'
    )

    assert outcome.to_payload()["confidence"] == 87
    assert isinstance(outcome.to_payload()["confidence"], int)


def test_string_confidence_is_a_schema_mismatch():
    text = '{"is_baby_cry": true, "cause": "hunger", "confidence": "87", "actions": []}'

    outcome = normalize_response(text)

    assert outcome.kind == "raw"
    assert outcome.reason == "schema_mismatch"
    assert outcome.to_payload() == {"raw": text}
