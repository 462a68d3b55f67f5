"""Shared fixtures for the signup tests."""

from __future__ import annotations

import itertools
from pathlib import Path

import pytest

from hpworld.config.app_config import GOOGLE_ENTRY_ENV
from hpworld.models.schema import CouponRequest, FormData
from hpworld.services.coupon_client import CouponClient
from hpworld.services.google_form import GoogleFormForwarder
from hpworld.services.relay import RelayService
from hpworld.services.repository import UserEntryRepository


# ---------------------------------------------------------------------------
# Environment isolation: no test may reach the real Google Form
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _no_google_form_env(monkeypatch):
    monkeypatch.delenv("GOOGLE_FORM_ID", raising=False)
    for env_name in GOOGLE_ENTRY_ENV.values():
        monkeypatch.delenv(env_name, raising=False)


# ---------------------------------------------------------------------------
# Form data
# ---------------------------------------------------------------------------

@pytest.fixture
def valid_form() -> FormData:
    return FormData(
        name="Asha Rao",
        mobile="9876543210",
        email="asha@example.com",
        interests=["Printers"],
        age_group="18-35",
        occupation="Engineer",
        pin_code="560001",
    )


@pytest.fixture
def valid_payload() -> dict:
    return {
        "name": "Asha Rao",
        "mobile": "9876543210",
        "email": "asha@example.com",
        "interests": ["Printers", "Accessories"],
        "ageGroup": "18-35",
        "occupation": "Engineer",
        "pinCode": "560001",
        "referredBy": "",
    }


# ---------------------------------------------------------------------------
# Relay side
# ---------------------------------------------------------------------------

@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data.json"


@pytest.fixture
def repository(data_file: Path) -> UserEntryRepository:
    return UserEntryRepository(str(data_file))


@pytest.fixture
def relay_service(repository: UserEntryRepository) -> RelayService:
    return RelayService(repository, GoogleFormForwarder(config={"form_id": None, "entries": {}}))


# ---------------------------------------------------------------------------
# Client side fakes
# ---------------------------------------------------------------------------

class FakeRelayClient:
    def __init__(self, error: Exception = None):
        self.error = error
        self.payloads = []

    async def save(self, payload: dict) -> None:
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error


class FakeCouponClient(CouponClient):
    """Records every coupon request; `failures` maps a campaign id to an error."""

    def __init__(self, failures: dict = None):
        counter = itertools.count(1)
        super().__init__(
            url="https://coupons.test/issue",
            request_ids=lambda: f"REQ{next(counter)}",
        )
        self.failures = failures or {}
        self.requests: list[CouponRequest] = []

    async def issue(self, request: CouponRequest) -> str:
        self.requests.append(request)
        error = self.failures.get(request.campaign_id)
        if error is not None:
            raise error
        return f"CODE-{request.request_id}"


@pytest.fixture
def fake_relay() -> FakeRelayClient:
    return FakeRelayClient()


@pytest.fixture
def fake_coupons() -> FakeCouponClient:
    return FakeCouponClient()
