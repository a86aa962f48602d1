"""
Billing module interfaces.

Other modules should depend on these protocols, not on the Supabase or
HTTP implementations behind them.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CheckoutIntent, CheckoutSession, Entitlement


@runtime_checkable
class IEntitlementResolver(Protocol):
    """Read-only view of what a member has paid for."""

    async def resolve(self, user_id: str, access_token: Optional[str]) -> Entitlement:
        """
        Resolve the member's current entitlement.

        Args:
            user_id: The member's identity
            access_token: The member's bearer token; the subscription view
                only returns the caller's own rows

        Returns:
            The entitlement, or Entitlement.none() when nothing active
            matches the catalog
        """
        ...


@runtime_checkable
class ICheckoutInitiator(Protocol):
    """Starts a hosted checkout with the payment processor."""

    async def initiate(self, intent: CheckoutIntent, access_token: Optional[str]) -> CheckoutSession:
        """
        Create a checkout session.

        Raises:
            MissingTokenError: If no access token is given
            CheckoutFailedError: If the processor refused or was unreachable
        """
        ...
