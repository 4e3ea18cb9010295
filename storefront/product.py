"""Products sold in the store, with optional expiry and shipping policies."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.expiration import ExpirableProduct, Expiration
from storefront.shipping import ShippableProduct, ShippingPolicy


@dataclass(eq=False)
class Product:
    """A stocked product. Products compare by identity, like stock entries."""

    name: str = "product"
    price: float = 0.0
    quantity: int = 0
    expiration: Expiration | None = None
    shipping: ShippingPolicy | None = None

    def is_expired(self) -> bool:
        """Return True if the product's expiry policy says it has expired."""
        return self.expiration is not None and self.expiration.is_expired()

    @property
    def expiry_date(self) -> float:
        """Expiry moment in epoch seconds, or 0 for products that never expire."""
        if isinstance(self.expiration, ExpirableProduct):
            return self.expiration.expiry_date
        return 0

    @property
    def weight(self) -> float:
        """Unit weight, or 0.0 for products that are not shipped."""
        if isinstance(self.shipping, ShippableProduct):
            return self.shipping.weight
        return 0.0

    @property
    def shipping_cost(self) -> float:
        """Unit shipping cost, or 0.0 for products that are not shipped."""
        if isinstance(self.shipping, ShippableProduct):
            return self.shipping.shipping_cost
        return 0.0

    def is_shippable(self) -> bool:
        """Return True if the product has to be shipped."""
        return self.shipping is not None and self.shipping.is_shippable()

    def is_available(self) -> bool:
        """Return True while some stock remains."""
        return self.quantity > 0

    def reduce_quantity(self, amount: int) -> None:
        """Take ``amount`` units out of stock."""
        self.quantity -= amount