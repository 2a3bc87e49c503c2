"""
Static catalog data served by the unprotected catalog view.
"""

from __future__ import annotations

from shopdash.common.models import CatalogItem

_HEADPHONES_IMAGE = (
    "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=500&q=80"
)
_WATCH_IMAGE = "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=500&q=80"
_KEYBOARD_IMAGE = (
    "https://images.unsplash.com/photo-1511467687858-23d96c32e4ae?w=500&q=80"
)
_SPEAKER_IMAGE = (
    "https://plus.unsplash.com/premium_photo-1728978926426-18fdb1d00e8a"
    "?q=80&w=2532&auto=format&fit=crop&ixlib=rb-4.1.0"
    "&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D"
)

CATALOG: tuple[CatalogItem, ...] = (
    CatalogItem(
        name="Premium Wireless Headphones",
        price=4922,
        image_url=_HEADPHONES_IMAGE,
        description=(
            "High-quality noise-canceling headphones with 40-hour battery life "
            "and superior comfort."
        ),
        in_stock=False,
        quantity=5,
        product_color="#3498db",
        discount=10,
    ),
    CatalogItem(
        name="Minimalist Smart Watch",
        price=45,
        image_url=_WATCH_IMAGE,
        description=(
            "Sleek smart watch with fitness tracking, heart rate monitor, "
            "and 7-day battery life."
        ),
        in_stock=True,
        quantity=5,
        product_color="#2c3e50",
        discount=12,
    ),
    CatalogItem(
        name="Mechanical Keyboard",
        price=129,
        image_url=_KEYBOARD_IMAGE,
        description=(
            "RGB mechanical keyboard with blue switches for a tactile typing "
            "experience."
        ),
        in_stock=True,
        quantity=5,
        product_color="#8e44ad",
        discount=15,
    ),
    CatalogItem(
        name="Portable Bluetooth Speaker",
        price=35,
        image_url=_SPEAKER_IMAGE,
        description="Compact waterproof speaker with 360-degree sound and deep bass.",
        in_stock=False,
        quantity=0,
        product_color="#e67e22",
        discount=20,
    ),
)

IMAGES: tuple[str, ...] = tuple(item.image_url for item in CATALOG)


def in_stock_items() -> list[CatalogItem]:
    """Return catalog items that can currently be ordered."""
    return [item for item in CATALOG if item.in_stock and item.quantity > 0]
