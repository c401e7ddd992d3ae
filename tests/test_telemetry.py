"""Tests for the Prometheus request metrics collected by the middleware."""

from prometheus_client import REGISTRY


def _requests(method: str, route: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "http_requests_total",
        {"method": method, "route": route, "status": status},
    )
    return value or 0.0


def test_matched_requests_are_labelled_with_the_route_template(client):
    before = _requests("GET", "/health", "200")

    response = client.get("/health")

    assert response.status_code == 200
    assert _requests("GET", "/health", "200") == before + 1


def test_unknown_paths_share_one_label(client):
    before = _requests("GET", "unmatched", "404")

    client.get("/wp-login.php")
    client.get("/.env")

    assert _requests("GET", "unmatched", "404") == before + 2
    assert _requests("GET", "/wp-login.php", "404") == 0.0


def test_metrics_scrapes_are_not_counted(client):
    before = _requests("GET", "/metrics", "200")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert b"http_requests_total" in response.content
    assert _requests("GET", "/metrics", "200") == before
