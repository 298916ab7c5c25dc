"""Request/response shapes for the payment intent endpoint."""

from typing import Any

from pydantic import BaseModel


class PaymentIntentRequest(BaseModel):
    """Validated creation request handed to the provider."""

    amount: int | float
    currency: str
    metadata: dict[str, Any] | None = None


class PaymentIntentResult(BaseModel):
    """Client secret returned verbatim from the provider."""

    clientSecret: str


class ErrorResponse(BaseModel):
    error: str
