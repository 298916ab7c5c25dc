"""Shared fixtures: an app wired to a recording fake provider."""

import pytest
from fastapi.testclient import TestClient

from paygate.common.config import GatewaySettings
from paygate.common.errors import ProviderError
from paygate.services.payment_intents.main import create_app


class FakeProvider:
    """Records every call and returns a fixed secret or raises a fixed error."""

    def __init__(self, client_secret: str = "secret_abc", error: str | None = None) -> None:
        self.client_secret = client_secret
        self.error = error
        self.calls: list[dict] = []

    async def create_intent(self, amount, currency, metadata, automatic_payment_methods=True):
        self.calls.append(
            {
                "amount": amount,
                "currency": currency,
                "metadata": metadata,
                "automatic_payment_methods": automatic_payment_methods,
            }
        )
        if self.error is not None:
            raise ProviderError(self.error)
        return self.client_secret


@pytest.fixture
def fake_provider():
    """Factory for fresh fake providers with a chosen secret or error."""

    def make(client_secret: str = "secret_abc", error: str | None = None) -> FakeProvider:
        return FakeProvider(client_secret=client_secret, error=error)

    return make


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(_env_file=None, stripe_secret_key="sk_test_dummy")


@pytest.fixture
def provider(fake_provider) -> FakeProvider:
    return fake_provider()


@pytest.fixture
def client(settings, provider) -> TestClient:
    return TestClient(create_app(settings, provider))
