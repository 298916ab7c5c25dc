"""Error taxonomy for payment intent creation.

Both kinds are translated to the same `{"error": ...}` response in one place
(`main.handle_payment_intent_error`).
"""


class PaymentIntentError(Exception):
    """Base class for failures surfaced to the caller as a 400 response."""

    error_type = "unknown"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PaymentIntentError):
    """Request shape is invalid; the provider was never contacted."""

    error_type = "validation"


class ProviderError(PaymentIntentError):
    """The payment provider rejected the call or could not be reached."""

    error_type = "provider"
