import os
import time
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest

# Settings are read once and cached; configure them before anything imports growtrack.
os.environ["SUPABASE_URL"] = "https://test-project.supabase.co"
os.environ["SUPABASE_ANON_KEY"] = "test-anon-key"
os.environ["SUPABASE_JWT_SECRET"] = "test-jwt-secret-for-growtrack"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["EXPORT_RATE_LIMIT"] = "1000/minute"

from jose import jwt  # noqa: E402

from growtrack.modules.environmental_analytics.domain.models import (  # noqa: E402
    AnalyticsScope,
    EnvironmentalReading,
    GrowthMeasurement,
    TimeRange,
    UserTier,
)
from growtrack.modules.environmental_analytics.domain.repositories import (  # noqa: E402
    EnvironmentalDataRepository,
    SubscriptionTierRepository,
)

JWT_SECRET = os.environ["SUPABASE_JWT_SECRET"]
BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

PREMIUM_USER = "user-premium"
FREE_USER = "user-free"
OTHER_USER = "user-other"


def at(hours: float) -> datetime:
    """Timestamp ``hours`` after 2024-01-01T00:00Z."""
    return BASE_TIME + timedelta(hours=hours)


def reading(hours: float = 0, temperature: float = 24, humidity: float = 50, **kwargs) -> EnvironmentalReading:
    return EnvironmentalReading(timestamp=at(hours), temperature=temperature, humidity=humidity, **kwargs)


def measurement(hours: float = 0, growth_rate: Optional[float] = None, **kwargs) -> GrowthMeasurement:
    return GrowthMeasurement(measured_at=at(hours), growth_rate=growth_rate, **kwargs)


def make_token(
    user_id: str = PREMIUM_USER,
    secret: str = JWT_SECRET,
    expires_in: int = 3600,
    audience: str = "authenticated",
    **claims,
) -> str:
    payload = {
        "sub": user_id,
        "aud": audience,
        "role": "authenticated",
        "email": f"{user_id}@example.com",
        "exp": int(time.time()) + expires_in,
        **claims,
    }
    if user_id is None:
        payload.pop("sub")
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers(user_id: str = PREMIUM_USER) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


class FakeEnvironmentalRepository(EnvironmentalDataRepository):
    """
    In-memory repository keyed by owner.

    Applies the same user, grow and time filtering the Supabase implementation
    pushes into its queries, and records every call.
    """

    def __init__(self, error: Optional[Exception] = None):
        self.readings: Dict[str, List[EnvironmentalReading]] = {}
        self.measurements: Dict[str, List[GrowthMeasurement]] = {}
        self.error = error
        self.calls: List[tuple] = []

    def add_readings(self, user_id: str, *readings: EnvironmentalReading) -> None:
        self.readings.setdefault(user_id, []).extend(readings)

    def add_measurements(self, user_id: str, *measurements: GrowthMeasurement) -> None:
        self.measurements.setdefault(user_id, []).extend(measurements)

    async def get_readings(self, scope: AnalyticsScope, time_range: Optional[TimeRange] = None):
        self.calls.append(("get_readings", scope, time_range))
        if self.error is not None:
            raise self.error

        result = [
            r for r in self.readings.get(scope.user_id, [])
            if scope.grow_id is None or r.grow_id == scope.grow_id
        ]
        if time_range is not None:
            result = [r for r in result if time_range.from_ <= r.timestamp <= time_range.to]
        return sorted(result, key=lambda r: r.timestamp)

    async def get_measurements(self, scope: AnalyticsScope):
        self.calls.append(("get_measurements", scope))
        if self.error is not None:
            raise self.error

        result = [
            m for m in self.measurements.get(scope.user_id, [])
            if scope.grow_id is None or m.grow_id == scope.grow_id
        ]
        return sorted(result, key=lambda m: m.measured_at)


class FakeSubscriptionTierRepository(SubscriptionTierRepository):
    def __init__(self, tiers: Optional[Dict[str, UserTier]] = None):
        self.tiers = tiers or {}

    async def get_user_tier(self, user_id: str) -> UserTier:
        return self.tiers.get(user_id, UserTier.FREE)


@pytest.fixture
def repository() -> FakeEnvironmentalRepository:
    return FakeEnvironmentalRepository()


@pytest.fixture
def tier_repository() -> FakeSubscriptionTierRepository:
    return FakeSubscriptionTierRepository({
        PREMIUM_USER: UserTier.PREMIUM,
        FREE_USER: UserTier.FREE,
        OTHER_USER: UserTier.ENTERPRISE,
    })


@pytest.fixture
def app(repository, tier_repository):
    from growtrack.main import app as fastapi_app
    from growtrack.modules.environmental_analytics.presentation.dependencies import (
        get_environmental_repository,
        get_subscription_repository,
    )

    fastapi_app.dependency_overrides[get_environmental_repository] = lambda: repository
    fastapi_app.dependency_overrides[get_subscription_repository] = lambda: tier_repository
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)
