"""
Static product catalog.

Products and their Stripe price ids, shipped with the code. Entitlements
are only recognized for price ids listed here.
"""

from typing import Optional

from .models import CatalogItem, PurchaseMode


STRIPE_PRODUCTS: list[CatalogItem] = [
    CatalogItem(
        id="prod_SjnDuBut536HjC",
        price_id="price_1RoJchRnZtvMGvfNpOAo3JfQ",
        name="BBQ",
        description="Food supplies for the upcoming BBQ",
        mode=PurchaseMode.PAYMENT,
    ),
]


def get_product_by_id(product_id: str) -> Optional[CatalogItem]:
    """Look up a catalog entry by product id."""
    return next((p for p in STRIPE_PRODUCTS if p.id == product_id), None)


def get_product_by_price_id(price_id: str) -> Optional[CatalogItem]:
    """Look up a catalog entry by price id."""
    return next((p for p in STRIPE_PRODUCTS if p.price_id == price_id), None)
