"""Shipping policies that decide whether and how a product is shipped."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class ShippingPolicy(ABC):
    """Policy telling whether a product needs to be shipped."""

    @abstractmethod
    def is_shippable(self) -> bool:
        """Return True if the product is delivered physically."""


@dataclass
class ShippableProduct(ShippingPolicy):
    """Policy for a physical product with a unit weight and shipping cost."""

    weight: float
    shipping_cost: float

    def is_shippable(self) -> bool:
        return True


class NonShippableProduct(ShippingPolicy):
    """Policy for products that are never shipped, such as digital goods."""

    def is_shippable(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"