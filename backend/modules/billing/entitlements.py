"""
Entitlement resolver.

Reads the member's subscription record from the view maintained by the
Stripe sync pipeline and matches it against the static catalog.
"""

import logging
from typing import Callable, Optional

import pydantic
from postgrest.exceptions import APIError
from supabase import Client

from shared.config import get_settings
from shared.database import get_supabase_user_client
from shared.exceptions import ExternalServiceError

from .catalog import get_product_by_price_id
from .interfaces import IEntitlementResolver
from .models import Entitlement, SubscriptionRecord, SubscriptionStatus

logger = logging.getLogger(__name__)


class EntitlementResolver(IEntitlementResolver):
    """
    Resolves entitlements through a user-scoped Supabase client.

    The view filters rows with auth.uid(), so it has to be queried with
    the member's own token; a service-role client would see every row.
    """

    def __init__(
        self,
        client_factory: Callable[[str], Client] = get_supabase_user_client,
        view: Optional[str] = None,
    ):
        self._client_factory = client_factory
        self._view = view or get_settings().subscriptions_view

    async def resolve(self, user_id: str, access_token: Optional[str]) -> Entitlement:
        if not access_token:
            return Entitlement.none()

        record = self._fetch_record(user_id, access_token)
        if record is None or not record.price_id:
            return Entitlement.none(record.subscription_status if record else SubscriptionStatus.NONE)

        if record.subscription_status != SubscriptionStatus.ACTIVE:
            return Entitlement.none(record.subscription_status)

        product = get_product_by_price_id(record.price_id)
        if product is None:
            logger.info(
                f"Active subscription with unknown price id {record.price_id}",
                extra={"user_id": user_id},
            )
            return Entitlement.none(record.subscription_status)

        return Entitlement(entitled=True, product=product, status=record.subscription_status)

    def _fetch_record(self, user_id: str, access_token: str) -> Optional[SubscriptionRecord]:
        client = self._client_factory(access_token)
        try:
            result = (
                client.table(self._view)
                .select("subscription_status, price_id")
                .limit(1)
                .execute()
            )
        except APIError as e:
            raise ExternalServiceError(
                f"Could not read subscription: {e.message}",
                service="supabase",
                code="SUBSCRIPTION_LOOKUP_FAILED",
            ) from e

        if not result.data:
            return None

        try:
            return SubscriptionRecord(**result.data[0])
        except pydantic.ValidationError:
            logger.warning(
                f"Unrecognized subscription record: {result.data[0]}",
                extra={"user_id": user_id},
            )
            return None
