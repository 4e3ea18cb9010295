"""A shopping cart holding products and the quantities ordered."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from storefront.product import Product
from storefront.shipping_service import ShippedItem, ShippingService

_RULE = "-------------------"


@dataclass
class CartLine:
    """One product in the cart and how many units of it were ordered."""

    product: Product
    quantity: int


@dataclass
class ShoppingCart:
    """Ordered lines of products waiting to be checked out."""

    lines: list[CartLine] = field(default_factory=list)

    def add(self, product: Product, quantity: int = 1) -> None:
        """Add ``quantity`` units of ``product``, merging with an existing line.

        Raises ValueError when the stock cannot cover the requested quantity.
        """
        if product.quantity < quantity:
            raise ValueError(f"Failed to add {product.name} to the cart.")
        for line in self.lines:
            if line.product is product:
                line.quantity += quantity
                return
        self.lines.append(CartLine(product, quantity))

    def remove(self, product: Product) -> None:
        """Drop every line holding ``product``."""
        self.lines = [line for line in self.lines if line.product is not product]

    def is_empty(self) -> bool:
        """Return True if the cart holds no lines."""
        return not self.lines

    def total_price(self) -> float:
        """Sum of price times quantity over all lines."""
        return sum(
            (line.product.price * line.quantity for line in self.lines), 0.0
        )

    def shipping_fees(self) -> float:
        """Sum of shipping cost times quantity over shippable lines."""
        return sum(
            (
                line.product.shipping_cost * line.quantity
                for line in self.lines
                if line.product.is_shippable()
            ),
            0.0,
        )

    def total_cost(self) -> float:
        """Price of the goods plus the shipping fees."""
        return self.total_price() + self.shipping_fees()

    def shippable_items(self) -> list[CartLine]:
        """Return the lines whose products have to be shipped."""
        return [line for line in self.lines if line.product.is_shippable()]

    def display_shippable_items(self, file: TextIO | None = None) -> None:
        """Write the shipment notice with per-line and total weights."""
        print("** Shipment notice **", file=file)
        total_weight = 0.0
        for line in self.shippable_items():
            weight = line.product.weight * line.quantity
            print(f"{line.quantity}x {line.product.name}  {weight:g}g", file=file)
            total_weight += weight
        print(f"Total Package weight: {total_weight:g}g", file=file)
        print(file=file)

    def display_receipt(self, file: TextIO | None = None) -> None:
        """Write the receipt with the price of every line."""
        print("** Checkout receipt **", file=file)
        for line in self.lines:
            amount = line.product.price * line.quantity
            print(f"{line.quantity}X {line.product.name}  {amount:g}", file=file)
        print(file=file)

    def display_checkout_details(self, file: TextIO | None = None) -> None:
        """Write the shipment notice, the receipt and the totals."""
        self.display_shippable_items(file)
        self.display_receipt(file)
        print(_RULE, file=file)
        print(f"Subtotal: {self.total_price():g}", file=file)
        print(f"Shipping: {self.shipping_fees():g}", file=file)
        print(f"Total Cost: {self.total_cost():g}", file=file)
        print(file=file)
        print(_RULE, file=file)

    def proceed_checkout(self, file: TextIO | None = None) -> bool:
        """Take the ordered units out of stock and ship them.

        Lines whose product has expired or lacks stock are removed and the
        checkout fails; stock of the remaining lines is still reduced. On
        success the details are written, the shipment processed and the cart
        emptied.
        """
        success = True
        for line in list(self.lines):
            product = line.product
            if product.is_expired() or line.quantity > product.quantity:
                print(
                    f"Item {product.name} is either expired or insufficient "
                    "quantity. Removing from cart.",
                    file=file,
                )
                self.remove(product)
                success = False
            else:
                product.reduce_quantity(line.quantity)
        if success:
            self.display_checkout_details(file)
            self.process_shipment(file)
            self.lines.clear()
        return success

    def process_shipment(self, file: TextIO | None = None) -> None:
        """Hand every shippable line to a shipping service and ship it."""
        service = ShippingService()
        for line in self.shippable_items():
            service.add_item(
                ShippedItem(line.product.name, line.product.weight * line.quantity)
            )
        service.process_shipment(file)