"""
Billing module exceptions.

These exceptions are raised by the billing module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class CheckoutFailedError(ExternalServiceError):
    """
    Raised when a checkout session could not be created.

    The message is shown to the member as-is.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            service="stripe_checkout",
            code="CHECKOUT_FAILED",
            details={"status_code": status_code} if status_code else {},
        )
