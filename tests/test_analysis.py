"""Integration-style tests for the /analyze-baby-cry endpoint."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from babycry.config.settings import settings
from babycry.controllers.dependencies import get_inference_client
from babycry.main import app
from babycry.pipelines.cry import PROMPT_TEMPLATES, Locale
from babycry.services.inference import InferenceError, InferenceTimeoutError

DUMMY_AUDIO = bytes(1024)

INDONESIAN_RESULT = {
    "is_baby_cry": True,
    "cause": "Lapar",
    "confidence": 87,
    "actions": ["Beri ASI"],
    "message": "Terdeteksi",
}


def _upload(client: TestClient, *, region: str | None = None, filename="test-audio.mp3",
            content_type="audio/mpeg", payload: bytes = DUMMY_AUDIO):
    data = {"region": region} if region is not None else {}
    return client.post(
        "/analyze-baby-cry",
        data=data,
        files={"audio": (filename, payload, content_type)},
    )


def test_missing_audio_returns_400(client, fake_inference):
    response = client.post("/analyze-baby-cry", data={"region": "US"})

    assert response.status_code == 400
    assert response.json() == {"message": "No audio file uploaded."}
    assert fake_inference.json_calls == []


def test_text_field_named_audio_counts_as_missing_upload(client, fake_inference):
    response = client.post("/analyze-baby-cry", data={"audio": "not-a-file", "region": "ID"})

    assert response.status_code == 400
    assert response.json() == {"message": "No audio file uploaded."}
    assert fake_inference.json_calls == []


def test_empty_audio_returns_400(client, fake_inference):
    response = _upload(client, payload=b"")

    assert response.status_code == 400
    assert response.json() == {"message": "Uploaded audio file is empty."}
    assert fake_inference.json_calls == []


def test_indonesian_region_returns_structured_result(client, fake_inference):
    fake_inference.json_response = json.dumps(INDONESIAN_RESULT)

    response = _upload(client, region="ID")

    assert response.status_code == 200
    assert response.json() == INDONESIAN_RESULT
    assert response.headers["X-Analysis-Result"] == "structured"

    call = fake_inference.json_calls[0]
    assert call["prompt"] == PROMPT_TEMPLATES[Locale.ID]
    assert call["mime_type"] == "audio/mpeg"
    assert call["audio"] == DUMMY_AUDIO


def test_missing_region_uses_default_prompt(client, fake_inference):
    fake_inference.json_response = json.dumps(
        {"is_baby_cry": False, "cause": "none", "confidence": 12, "actions": []}
    )

    response = _upload(client)

    assert response.status_code == 200
    assert response.json() == {"is_baby_cry": False, "cause": "none", "confidence": 12, "actions": []}
    assert fake_inference.json_calls[0]["prompt"] == PROMPT_TEMPLATES[Locale.US]


def test_octet_stream_upload_resolves_type_from_filename(client, fake_inference):
    fake_inference.json_response = json.dumps(INDONESIAN_RESULT)

    response = _upload(client, filename="recording.m4a", content_type="application/octet-stream")

    assert response.status_code == 200
    assert fake_inference.json_calls[0]["mime_type"] == "audio/mp4"


def test_prose_answer_degrades_to_raw_text(client, fake_inference):
    fake_inference.json_response = "The baby seems hungry, try feeding."

    response = _upload(client, region="US")

    assert response.status_code == 200
    assert response.json() == {"raw": "The baby seems hungry, try feeding."}
    assert response.headers["X-Analysis-Result"] == "raw"


def test_wrong_shape_degrades_to_raw_text(client, fake_inference):
    fake_inference.json_response = json.dumps({"answer": "crying"})

    response = _upload(client)

    assert response.status_code == 200
    assert response.json() == {"raw": '{"answer": "crying"}'}
    assert response.headers["X-Analysis-Result"] == "raw"


def test_upstream_failure_returns_500_with_message(client, fake_inference):
    fake_inference.error = InferenceError("Quota exceeded")

    response = _upload(client)

    assert response.status_code == 500
    assert response.json() == {"message": "Quota exceeded"}


def test_unexpected_upstream_exception_returns_500_with_message(client, fake_inference):
    fake_inference.error = RuntimeError("connection reset")

    response = _upload(client)

    assert response.status_code == 500
    assert response.json() == {"message": "connection reset"}


def test_upstream_timeout_returns_500(client, fake_inference):
    fake_inference.error = InferenceTimeoutError(
        "Inference service did not respond within 60 seconds."
    )

    response = _upload(client)

    assert response.status_code == 500
    assert "did not respond" in response.json()["message"]


def test_oversized_upload_returns_413(client, fake_inference, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "max_upload_bytes", 16)

    response = _upload(client, payload=bytes(17))

    assert response.status_code == 413
    assert "limit" in response.json()["message"]
    assert fake_inference.json_calls == []


def test_dependency_override_replaces_module_client(fake_inference):
    """The module-level app resolves its client through an overridable dependency."""

    fake_inference.json_response = json.dumps(INDONESIAN_RESULT)
    app.dependency_overrides[get_inference_client] = lambda: fake_inference
    try:
        response = _upload(TestClient(app), region="ID")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == INDONESIAN_RESULT
