"""
Checkout initiator.

Asks the stripe-checkout edge function for a hosted checkout session on
behalf of the member. One request, no retry.
"""

import logging
from typing import Any, Optional

import httpx

from modules.auth.exceptions import MissingTokenError
from shared.config import get_settings

from .exceptions import CheckoutFailedError
from .interfaces import ICheckoutInitiator
from .models import CheckoutIntent, CheckoutSession

logger = logging.getLogger(__name__)


class CheckoutInitiator(ICheckoutInitiator):
    """Creates checkout sessions through the configured endpoint."""

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        settings = get_settings()
        self._endpoint = endpoint or settings.resolved_checkout_endpoint
        self._timeout = timeout or settings.checkout_timeout_seconds

    async def initiate(self, intent: CheckoutIntent, access_token: Optional[str]) -> CheckoutSession:
        if not access_token:
            raise MissingTokenError("Please log in to make a purchase")

        payload = {
            "price_id": intent.price_id,
            "mode": intent.mode.value,
            "success_url": intent.success_url,
            "cancel_url": intent.cancel_url,
        }
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self._endpoint, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"Checkout request failed: {e}")
            raise CheckoutFailedError("Failed to initiate purchase") from e

        data = self._json(response)

        if not response.is_success:
            message = data.get("error") or "Failed to create checkout session"
            logger.warning(
                f"Checkout rejected with {response.status_code}: {message}",
                extra={"error_code": "CHECKOUT_FAILED"},
            )
            raise CheckoutFailedError(message, status_code=response.status_code)

        url = data.get("url")
        if not url:
            raise CheckoutFailedError("No checkout URL received", status_code=response.status_code)

        logger.info(f"Checkout session created for price {intent.price_id}")
        return CheckoutSession(url=url, session_id=data.get("sessionId"))

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
