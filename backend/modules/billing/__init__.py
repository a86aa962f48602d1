"""
Billing module.

Static product catalog, entitlement lookup against the Stripe-synced
subscription view, and checkout initiation.

Public API:
- IEntitlementResolver, ICheckoutInitiator: Billing interfaces
- CatalogItem, Entitlement, CheckoutIntent, CheckoutSession: Billing models
- STRIPE_PRODUCTS, get_product_by_id, get_product_by_price_id: Catalog
- CheckoutFailedError: Raised when no checkout session could be created
"""

from .interfaces import IEntitlementResolver, ICheckoutInitiator
from .models import (
    CatalogItem,
    PurchaseMode,
    SubscriptionStatus,
    SubscriptionRecord,
    Entitlement,
    CheckoutIntent,
    CheckoutSession,
    CheckoutRequest,
)
from .catalog import STRIPE_PRODUCTS, get_product_by_id, get_product_by_price_id
from .exceptions import CheckoutFailedError

__all__ = [
    # Interfaces
    "IEntitlementResolver",
    "ICheckoutInitiator",
    # Models
    "CatalogItem",
    "PurchaseMode",
    "SubscriptionStatus",
    "SubscriptionRecord",
    "Entitlement",
    "CheckoutIntent",
    "CheckoutSession",
    "CheckoutRequest",
    # Catalog
    "STRIPE_PRODUCTS",
    "get_product_by_id",
    "get_product_by_price_id",
    # Exceptions
    "CheckoutFailedError",
]
