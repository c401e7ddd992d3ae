"""Telemetry helpers and metrics."""

from .metrics import (
    ANALYSIS_OUTCOMES,
    ERROR_COUNTER,
    INFERENCE_FAILURES,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    observe_request,
    record_analysis_outcome,
    record_inference_failure,
)

__all__ = [
    "ANALYSIS_OUTCOMES",
    "ERROR_COUNTER",
    "INFERENCE_FAILURES",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "observe_request",
    "record_analysis_outcome",
    "record_inference_failure",
]
