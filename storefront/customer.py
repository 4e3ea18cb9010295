"""Customers who fill a cart and pay for it from their balance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from storefront.cart import ShoppingCart
from storefront.product import Product


class CheckoutError(Exception):
    """Raised when a checkout cannot be completed."""


class EmptyCartError(CheckoutError):
    """Raised when checking out a cart that holds nothing."""


class InsufficientBalanceError(CheckoutError):
    """Raised when the cart costs more than the customer's balance."""


class ItemUnavailableError(CheckoutError):
    """Raised when an item in the cart has expired or lacks stock."""


@dataclass
class Customer:
    """A named customer with a balance and a shopping cart."""

    name: str
    balance: float
    cart: ShoppingCart = field(default_factory=ShoppingCart)

    def add_to_cart(self, product: Product, quantity: int = 1) -> None:
        """Put ``quantity`` units of ``product`` in the cart.

        Raises ValueError when the stock cannot cover the quantity.
        """
        self.cart.add(product, quantity)

    def remove_from_cart(self, product: Product) -> None:
        """Take ``product`` out of the cart."""
        self.cart.remove(product)

    def checkout(self, file: TextIO | None = None) -> float:
        """Pay for the cart and ship it; return the remaining balance."""
        if self.cart.is_empty():
            raise EmptyCartError(
                "Cart is empty. Please add items to the cart before checkout."
            )
        total = self.cart.total_cost()
        if total > self.balance:
            raise InsufficientBalanceError(
                f"Insufficient balance for checkout. Total cost: {total:g}, "
                f"Balance: {self.balance:g}"
            )
        if not self.cart.proceed_checkout(file):
            raise ItemUnavailableError(
                "Checkout failed due to item issues "
                "(expired or insufficient quantity)."
            )
        self.balance -= total
        print(file=file)
        print("-------------------", file=file)
        print(f"Checkout successful. Remaining balance: {self.balance:g}", file=file)
        return self.balance