"""Payment intent creation: validate the amount, delegate to the provider."""

import math
from time import perf_counter
from typing import Any

from paygate.common.errors import ProviderError, ValidationError
from paygate.common.logging import logger
from paygate.common.metrics import payment_intent_failures_total, provider_latency_seconds
from paygate.services.payment_intents.provider import PaymentProvider
from paygate.services.payment_intents.schemas import PaymentIntentRequest, PaymentIntentResult


class PaymentIntentService:
    """Stateless request forwarder around one `PaymentProvider`."""

    def __init__(
        self,
        provider: PaymentProvider,
        default_currency: str = "usd",
        service_name: str = "payment-intent-gateway",
    ) -> None:
        self.provider = provider
        self.default_currency = default_currency
        self.service_name = service_name

    def _validate(self, payload: Any) -> PaymentIntentRequest:
        """Shape check for the raw JSON body; amount is the only enforced rule."""

        if not isinstance(payload, dict):
            raise ValidationError("Invalid request body")
        amount = payload.get("amount")
        # bool is an int subclass but not a JSON number
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValidationError("Invalid amount")
        if (isinstance(amount, float) and not math.isfinite(amount)) or amount <= 0:
            raise ValidationError("Invalid amount")
        currency = payload.get("currency")
        if currency is None:
            currency = self.default_currency
        return PaymentIntentRequest.model_construct(
            amount=amount,
            currency=currency,
            metadata=payload.get("metadata"),
        )

    async def create_payment_intent(self, payload: Any) -> PaymentIntentResult:
        """Validate, call the provider once, and return its client secret."""

        try:
            req = self._validate(payload)
        except ValidationError as exc:
            payment_intent_failures_total.labels(service=self.service_name, error_type=exc.error_type).inc()
            logger.info("payment_intent_rejected reason=%s", exc.message)
            raise

        start = perf_counter()
        try:
            client_secret = await self.provider.create_intent(
                req.amount,
                req.currency,
                req.metadata,
                automatic_payment_methods=True,
            )
        except ProviderError as exc:
            payment_intent_failures_total.labels(service=self.service_name, error_type=exc.error_type).inc()
            raise
        finally:
            provider_latency_seconds.labels(service=self.service_name).observe(max(0.0, perf_counter() - start))
        return PaymentIntentResult(clientSecret=client_secret)
