import pytest
from postgrest import APIError

from growtrack.shared.core.exceptions import AuthorizationError, NotFoundError

from conftest import (
    FREE_USER,
    OTHER_USER,
    PREMIUM_USER,
    auth_headers,
    measurement,
    reading,
)

BASE = "/api/v1/analytics/environmental"


@pytest.fixture
def seeded(repository):
    repository.add_readings(
        PREMIUM_USER,
        reading(0, temperature=24, humidity=50, grow_id="g1", light_intensity=400),
        reading(5, temperature=31, humidity=50, grow_id="g1"),
        reading(30, temperature=26, humidity=60, grow_id="g2", vpd=1.1),
    )
    repository.add_measurements(
        PREMIUM_USER,
        measurement(1, grow_id="g1"),
        measurement(6, growth_rate=2, grow_id="g1"),
    )
    return repository


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_missing_token_is_unauthorized(client):
    response = client.get(f"{BASE}/stats")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


def test_invalid_token_is_unauthorized(client):
    response = client.get(f"{BASE}/stats", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401


@pytest.mark.parametrize("path", ["/stats", "/impact", "/data", "/data/export"])
def test_free_tier_is_payment_required(client, path):
    response = client.get(f"{BASE}{path}", headers=auth_headers(FREE_USER))

    assert response.status_code == 402
    error = response.json()["error"]
    assert error["code"] == "SUBSCRIPTION_ERROR"
    assert error["details"] == {
        "feature": "environmental_analytics",
        "subscription_status": "free",
        "required_plan": "premium",
    }


def test_user_without_profile_counts_as_free(client):
    response = client.get(f"{BASE}/stats", headers=auth_headers("no-profile-user"))

    assert response.status_code == 402


def test_enterprise_tier_is_allowed(client):
    response = client.get(f"{BASE}/stats", headers=auth_headers(OTHER_USER))

    assert response.status_code == 200
    assert response.json()["totalReadings"] == 0


def test_stats_camel_case_payload(client, seeded):
    response = client.get(f"{BASE}/stats", headers=auth_headers())

    assert response.status_code == 200
    body = response.json()
    assert body["totalReadings"] == 3
    assert body["averageTemperature"] == pytest.approx(27)
    assert body["stressEvents"] == 1
    assert body["averageLightIntensity"] == pytest.approx(400 / 3)
    assert body["averageVPD"] == pytest.approx(1.1 / 3)
    assert "averageCO2" not in body


def test_stats_scoped_by_grow(client, seeded):
    response = client.get(f"{BASE}/stats", params={"grow_id": "g2"}, headers=auth_headers())

    assert response.json()["totalReadings"] == 1
    assert seeded.calls[-1][1].grow_id == "g2"
    assert seeded.calls[-1][1].user_id == PREMIUM_USER


def test_impact_payload(client, seeded):
    response = client.get(f"{BASE}/impact", params={"grow_id": "g1"}, headers=auth_headers())

    assert response.status_code == 200
    body = response.json()
    assert body["correlations"] == {
        "temperatureGrowth": pytest.approx(48),
        "humidityGrowth": pytest.approx(100),
        "lightGrowth": pytest.approx(800),
    }
    assert body["optimalRanges"]["temperature"] == {"min": 24, "max": 24}
    assert body["optimalRanges"]["lightIntensity"] == {"min": 400, "max": 400}
    assert "co2" not in body["optimalRanges"]


def test_impact_defaults_without_data(client):
    response = client.get(f"{BASE}/impact", headers=auth_headers())

    assert response.json() == {
        "correlations": {"temperatureGrowth": 0, "humidityGrowth": 0},
        "optimalRanges": {
            "temperature": {"min": 20, "max": 30},
            "humidity": {"min": 40, "max": 70},
        },
    }


def test_data_series(client, seeded):
    response = client.get(f"{BASE}/data", headers=auth_headers())

    assert response.status_code == 200
    points = response.json()
    assert [p["temperature"] for p in points] == [24, 31, 26]
    assert points[0]["lightIntensity"] == 400
    assert "co2Level" not in points[0]
    assert points[2]["vpd"] == 1.1


def test_data_time_window(client, seeded):
    response = client.get(
        f"{BASE}/data",
        params={"from": "2024-01-01T04:00:00Z", "to": "2024-01-01T06:00:00Z"},
        headers=auth_headers(),
    )

    assert [p["temperature"] for p in response.json()] == [31]


@pytest.mark.parametrize(
    "params",
    [
        {"from": "2024-01-01T00:00:00Z"},
        {"to": "2024-01-01T00:00:00Z"},
        {"from": "2024-01-02T00:00:00Z", "to": "2024-01-01T00:00:00Z"},
    ],
)
def test_data_rejects_incomplete_or_inverted_window(client, params):
    response = client.get(f"{BASE}/data", params=params, headers=auth_headers())

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_export_csv(client, seeded):
    response = client.get(f"{BASE}/data/export", params={"grow_id": "g1"}, headers=auth_headers())

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="environmental_analytics_')
    assert disposition.endswith('.csv"')
    lines = response.text.strip().split("\n")
    assert lines[0] == "date,temperature_celsius,humidity_percent,light_intensity,co2_level,vpd"
    assert lines[1:] == ["2024-01-01,24,50,400,,", "2024-01-01,31,50,,,"]


def test_request_id_is_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_error_envelope_carries_request_id(client):
    response = client.get(f"{BASE}/stats", headers={"X-Request-ID": "req-456"})

    assert response.json()["error"]["request_id"] == "req-456"


def test_row_store_failure_is_bad_gateway(client, repository):
    repository.error = APIError({"message": "connection refused", "code": "500"})

    response = client.get(f"{BASE}/stats", headers=auth_headers())

    assert response.status_code == 502
    error = response.json()["error"]
    assert error["code"] == "EXTERNAL_SERVICE_ERROR"
    assert error["details"]["service_error"] == "connection refused"


@pytest.mark.parametrize(
    "error, status_code, code",
    [
        (NotFoundError("Grow not found", resource_type="grow", resource_id="g9"), 404, "NOT_FOUND"),
        (AuthorizationError(resource_type="grow", resource_id="g9"), 403, "AUTHORIZATION_ERROR"),
    ],
)
def test_application_errors_use_their_status(client, repository, error, status_code, code):
    repository.error = error

    response = client.get(f"{BASE}/impact", params={"grow_id": "g9"}, headers=auth_headers())

    assert response.status_code == status_code
    body = response.json()["error"]
    assert body["code"] == code
    assert body["details"]["resource_id"] == "g9"
