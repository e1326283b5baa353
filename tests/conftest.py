from typing import Dict
from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time

DEFAULT_ENV = {
    "AWS_ACCESS_KEY_ID": "test-access-key",
    "AWS_SECRET_ACCESS_KEY": "test-secret-key",
    "AWS_SESSION_TOKEN": "test-session",
    "AWS_DEFAULT_REGION": "us-east-1",
    "PUSHOVER_TOKEN": "test-token",
    "PUSHOVER_USER_KEY": "test-user-key",
}


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    for key, value in DEFAULT_ENV.items():
        monkeypatch.setenv(key, value)
    yield


@pytest.fixture(autouse=True)
def stubbed_boto3_session(monkeypatch):
    """
    Prevent real AWS calls by replacing boto3.Session with a lightweight stub.
    """
    import boto3

    class _StubSession:
        def __init__(self):
            self.clients: Dict[str, MagicMock] = {}

        def client(self, service_name: str, region_name: str | None = None):
            client = self.clients.get(service_name)
            if not client:
                client = MagicMock(name=f"{service_name}_client")
                self.clients[service_name] = client
            return client

    session = _StubSession()
    monkeypatch.setattr(boto3, "Session", lambda **_: session)
    return session


@pytest.fixture
def freezer():
    """
    Provide a FrozenDateTimeFactory so tests can adjust time deterministically.
    """
    with freeze_time("2020-01-01T00:00:00Z") as frozen_datetime:
        yield frozen_datetime


def make_store(name, distance="1.0 mi", availability=None,
               reservation_url="https://www.apple.com/retail/store"):
    """
    Builds a vendor store record. ``availability`` maps part number to its
    pickupDisplay flag.
    """
    return {
        "storeName": name,
        "storeDistanceWithUnit": distance,
        "reservationUrl": reservation_url,
        "makeReservationUrl": reservation_url,
        "partsAvailability": {
            part_number: {
                "storePickEligible": display == "available",
                "pickupDisplay": display,
                "partNumber": part_number,
            }
            for part_number, display in (availability or {}).items()
        },
    }


def make_payload(*stores):
    return {"body": {"content": {"pickupMessage": {"stores": list(stores)}}}}


@pytest.fixture
def store_factory():
    return make_store


@pytest.fixture
def payload_factory():
    return make_payload
