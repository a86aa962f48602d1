"""
Billing module data models.

These models define the catalog, the subscription record synced from
Stripe, the entitlement derived from it, and checkout requests.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PurchaseMode(str, Enum):
    """How a catalog item is bought."""

    PAYMENT = "payment"            # One-time purchase
    SUBSCRIPTION = "subscription"  # Recurring


class SubscriptionStatus(str, Enum):
    """Subscription states as written by the Stripe sync pipeline."""

    NONE = "none"
    NOT_STARTED = "not_started"
    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"
    PAUSED = "paused"


class CatalogItem(BaseModel):
    """A purchasable product."""

    model_config = {"frozen": True}

    id: str = Field(..., description="Stripe product ID")
    price_id: str = Field(..., description="Stripe price ID")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Product description")
    mode: PurchaseMode = Field(..., description="Payment or subscription")


class SubscriptionRecord(BaseModel):
    """
    A row of the stripe_user_subscriptions view.

    Written by an external pipeline; this service only reads it.
    """

    subscription_status: SubscriptionStatus = Field(default=SubscriptionStatus.NONE)
    price_id: Optional[str] = Field(None, description="Stripe price ID")
    customer_id: Optional[str] = None
    subscription_id: Optional[str] = None
    current_period_start: Optional[int] = None
    current_period_end: Optional[int] = None
    cancel_at_period_end: bool = False


class Entitlement(BaseModel):
    """What a member has paid for, if anything."""

    model_config = {"frozen": True}

    entitled: bool = Field(..., description="Whether an active catalog product is held")
    product: Optional[CatalogItem] = Field(None, description="The held product")
    status: SubscriptionStatus = Field(default=SubscriptionStatus.NONE)

    @classmethod
    def none(cls, status: SubscriptionStatus = SubscriptionStatus.NONE) -> "Entitlement":
        return cls(entitled=False, product=None, status=status)


class CheckoutIntent(BaseModel):
    """A purchase the member wants to start."""

    product_id: str
    price_id: str
    mode: PurchaseMode
    success_url: str
    cancel_url: str


class CheckoutSession(BaseModel):
    """
    Stripe checkout session info.

    Returned when initiating a purchase.
    """

    url: str = Field(..., description="Checkout URL to redirect user to")
    session_id: Optional[str] = Field(None, description="Stripe checkout session ID")


class CheckoutRequest(BaseModel):
    """Request to start a checkout."""

    product_id: str = Field(..., description="Catalog product ID")
    price_id: str = Field(..., description="Stripe price ID")
    mode: PurchaseMode = Field(..., description="Payment or subscription")


class ProductListResponse(BaseModel):
    """API response for the catalog."""

    products: list[CatalogItem] = Field(..., description="Catalog entries")
