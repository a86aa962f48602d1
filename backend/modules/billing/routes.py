"""
Billing API endpoints.

Catalog, entitlement lookup and checkout initiation. Admitted members only.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_checkout_initiator, get_entitlement_resolver
from api.middleware.auth import require_member
from modules.access.models import Member
from shared.config import get_settings

from .catalog import STRIPE_PRODUCTS
from .interfaces import ICheckoutInitiator, IEntitlementResolver
from .models import (
    CheckoutIntent,
    CheckoutRequest,
    CheckoutSession,
    Entitlement,
    ProductListResponse,
)

router = APIRouter()


@router.get("/products", response_model=ProductListResponse)
async def list_products(
    member: Member = Depends(require_member),
) -> ProductListResponse:
    """List the purchasable products."""
    return ProductListResponse(products=STRIPE_PRODUCTS)


@router.get("/entitlement", response_model=Entitlement)
async def get_entitlement(
    member: Member = Depends(require_member),
    resolver: IEntitlementResolver = Depends(get_entitlement_resolver),
) -> Entitlement:
    """The current member's active catalog product, if any."""
    return await resolver.resolve(member.user_id, member.user.access_token)


@router.post("/checkout", response_model=CheckoutSession)
async def create_checkout(
    request: CheckoutRequest,
    member: Member = Depends(require_member),
    initiator: ICheckoutInitiator = Depends(get_checkout_initiator),
) -> CheckoutSession:
    """
    Start a hosted checkout.

    Returns the URL the client should navigate to. Whether the purchase
    completes is only visible later through the entitlement endpoint.
    """
    frontend_url = get_settings().frontend_url.rstrip("/")
    intent = CheckoutIntent(
        product_id=request.product_id,
        price_id=request.price_id,
        mode=request.mode,
        success_url=f"{frontend_url}/success",
        cancel_url=f"{frontend_url}/purchase",
    )
    return await initiator.initiate(intent, member.user.access_token)
