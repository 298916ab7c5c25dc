"""Send one payment intent request to a running gateway and print the reply.

Useful for smoke-testing provider credentials after a deploy.
"""

import argparse
import json
from uuid import uuid4

import httpx


def create_intent(base_url: str, amount: float, currency: str | None, metadata: dict | None) -> httpx.Response:
    """POST one creation request and return the raw response."""

    payload: dict = {"amount": amount}
    if currency is not None:
        payload["currency"] = currency
    if metadata is not None:
        payload["metadata"] = metadata
    with httpx.Client(timeout=30.0) as client:
        return client.post(
            f"{base_url}/payments/create-payment-intent",
            json=payload,
            headers={"x-request-id": str(uuid4())},
        )


def main() -> None:
    """Parse CLI args, send the request, print status and body."""

    parser = argparse.ArgumentParser(description="Create one payment intent through the gateway.")
    parser.add_argument("--base-url", default="http://localhost:3000")
    parser.add_argument("--amount", type=float, required=True, help="Amount in the smallest currency unit")
    parser.add_argument("--currency", default=None)
    parser.add_argument("--metadata", default=None, help="Inline JSON object")
    args = parser.parse_args()

    amount = int(args.amount) if args.amount.is_integer() else args.amount
    metadata = json.loads(args.metadata) if args.metadata else None
    resp = create_intent(args.base_url.rstrip("/"), amount, args.currency, metadata)
    print(f"status={resp.status_code}")
    print(resp.text)


if __name__ == "__main__":
    main()
