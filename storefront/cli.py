"""Demonstration run of the store: sample products and customers."""

from __future__ import annotations

import argparse
import time
from typing import TextIO

from storefront.customer import CheckoutError, Customer
from storefront.expiration import ExpirableProduct, NonExpirableProduct
from storefront.product import Product
from storefront.shipping import NonShippableProduct, ShippableProduct


def parse_date(text: str) -> float:
    """Turn a ``YYYY-MM-DD`` date into local-midnight epoch seconds."""
    parts = text.strip().split("-")
    if len(parts) != 3:
        raise ValueError(f"invalid date: {text!r}")
    year, month, day = (int(part) for part in parts)
    return time.mktime((year, month, day, 0, 0, 0, 0, 0, -1))


def print_separator(title: str, file: TextIO | None = None) -> None:
    """Write a titled banner framed by rules of '=' characters."""
    rule = "=" * 50
    print(f"\n{rule}", file=file)
    print(f"  {title}", file=file)
    print(rule, file=file)


def _add(customer: Customer, product: Product, quantity: int) -> None:
    try:
        customer.add_to_cart(product, quantity)
    except ValueError as error:
        print(error)


def _checkout(customer: Customer) -> None:
    try:
        customer.checkout()
    except CheckoutError as error:
        print(error)


def main(argv: list[str] | None = None) -> int:
    """Run the sample scenarios and print their outcome."""
    argparse.ArgumentParser(
        prog="storefront", description="Run the sample store scenarios."
    ).parse_args(argv)

    print_separator("E-COMMERCE SYSTEM")
    print_separator("SCENARIO 1: Mixed Product Types")
    print("Testing products that are both expirable and shippable...")

    cheese = Product(
        "Cheddar Cheese", 12.99, 50,
        ExpirableProduct(parse_date("2025-08-15")), ShippableProduct(0.5, 3.0),
    )
    frozen_meat = Product(
        "Premium Beef", 25.50, 30,
        ExpirableProduct(parse_date("2025-09-01")), ShippableProduct(2.0, 8.0),
    )
    laptop = Product(
        "Gaming Laptop", 1299.99, 15, NonExpirableProduct(), ShippableProduct(2.5, 25.0)
    )
    books = Product(
        "Books Set", 89.99, 25, NonExpirableProduct(), ShippableProduct(1.2, 5.0)
    )
    software = Product(
        "Software License", 199.99, 100, NonExpirableProduct(), NonShippableProduct()
    )
    gift_card = Product(
        "Mobile Gift Card", 50.0, 500, NonExpirableProduct(), NonShippableProduct()
    )
    expired_milk = Product(
        "Expired Milk", 4.99, 20,
        ExpirableProduct(parse_date("2024-01-01")), ShippableProduct(1.0, 2.0),
    )

    print_separator("TEST CASE 1 - Mixed Cart")
    customer1 = Customer("Amr Magdy", 2000.0)
    print("\n-> Adding products to cart...")
    _add(customer1, cheese, 3)
    _add(customer1, laptop, 1)
    _add(customer1, software, 2)
    _add(customer1, books, 2)
    _checkout(customer1)

    print_separator("TEST CASE 2: Insufficient Balance")
    customer2 = Customer("Ali Ahmed", 100.0)
    print("\n-> Attempting to buy expensive items with low balance...")
    _add(customer2, laptop, 2)
    _checkout(customer2)

    print_separator("TEST CASE 3: Quantity Exceeding Available Stock")
    customer3 = Customer("Ayman Alaa", 3000.0)
    print("\n-> Attempting to buy more than available stock...")
    _add(customer3, laptop, 20)
    _add(customer3, cheese, 5)
    _checkout(customer3)

    print_separator("TEST CASE 4: Expired Products Handling")
    customer4 = Customer("Mahmoud Aly", 1500.0)
    print("\n-> Adding expired product...")
    _add(customer4, expired_milk, 2)
    _add(customer4, frozen_meat, 3)
    _add(customer4, gift_card, 1)
    print("\n-> Checkout will not succeed...")
    _checkout(customer4)

    print_separator("TEST CASE 5: Digital-Only Purchase")
    customer5 = Customer("Bahaa", 800.0)
    print("\n-> Buying only digital products (no shipping costs)...")
    _add(customer5, software, 3)
    _add(customer5, gift_card, 4)
    _checkout(customer5)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())