"""Payment provider capability and its Stripe implementation.

The gateway only needs one provider operation: create a payment intent and
hand back its client secret.
"""

from typing import Any, Protocol

import stripe
from starlette.concurrency import run_in_threadpool

from paygate.common.errors import ProviderError
from paygate.common.logging import logger


class PaymentProvider(Protocol):
    """Anything that can create a payment intent and return its client secret."""

    async def create_intent(
        self,
        amount: int | float,
        currency: str,
        metadata: dict[str, Any] | None,
        automatic_payment_methods: bool = True,
    ) -> str:
        ...


class StripePaymentProvider:
    """Creates PaymentIntents through the Stripe SDK.

    Credentials and API version travel as per-request options, so the
    module-level `stripe.api_key` is never touched.
    """

    def __init__(self, api_key: str | None, api_version: str) -> None:
        self.api_key = api_key
        self.api_version = api_version

    def _create(self, params: dict[str, Any]) -> stripe.PaymentIntent:
        return stripe.PaymentIntent.create(
            api_key=self.api_key,
            stripe_version=self.api_version,
            **params,
        )

    async def create_intent(
        self,
        amount: int | float,
        currency: str,
        metadata: dict[str, Any] | None,
        automatic_payment_methods: bool = True,
    ) -> str:
        """Create one PaymentIntent; any Stripe failure becomes `ProviderError`."""

        params: dict[str, Any] = {
            "amount": amount,
            "currency": currency,
            "automatic_payment_methods": {"enabled": automatic_payment_methods},
        }
        if metadata is not None:
            params["metadata"] = metadata
        try:
            intent = await run_in_threadpool(self._create, params)
        except stripe.StripeError as exc:
            message = exc.user_message or str(exc)
            logger.warning("stripe_create_intent_failed type=%s message=%s", type(exc).__name__, message)
            raise ProviderError(message) from exc
        except Exception as exc:
            logger.warning("provider_create_intent_failed type=%s message=%s", type(exc).__name__, exc)
            raise ProviderError(str(exc) or type(exc).__name__) from exc
        return intent.client_secret
