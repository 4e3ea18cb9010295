# storefront

`storefront` models a small online shop. A product can have an expiry date or none. It can need shipping or not. Customers put products in a shopping cart. At checkout the package checks:

- the customer's balance
- each product's expiry date
- the stock left

A successful checkout prints a shipment notice, a receipt with totals, and a shipping log.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
storefront
```

This runs a fixed demonstration made of five scenarios:

1. a mixed cart
2. a customer whose balance is too low
3. a request for more than the available stock
4. expired goods in the cart
5. a purchase of digital goods only

Each failed step prints its error message, and the run goes on to the next step.

Some sample products have fixed expiry dates, and those dates are compared with the current clock. The outcome of the scenarios therefore depends on the day you run it. The command takes no options apart from `--help`.

## Library use

```python
from datetime import datetime

from storefront.expiration import ExpirableProduct, NonExpirableProduct
from storefront.shipping import ShippableProduct, NonShippableProduct
from storefront.product import Product
from storefront.customer import Customer, CheckoutError

cheese = Product(
    "Cheddar Cheese", 12.99, 50,
    ExpirableProduct(datetime(2030, 8, 15).timestamp()),
    ShippableProduct(0.5, 3.0),
)
licence = Product("Software License", 199.99, 100,
                  NonExpirableProduct(), NonShippableProduct())

customer = Customer("Example Buyer", 500.0)
customer.add_to_cart(cheese, 3)
customer.add_to_cart(licence, 1)
try:
    remaining = customer.checkout()
except CheckoutError as exc:
    print(f"checkout failed: {exc}")
```

### Modules

- `storefront.expiration` contains expiry policies:
  - `Expiration` is the abstract base.
  - `ExpirableProduct(expiry_date)` takes the expiry date as epoch seconds. It counts as expired once the current time is past that date.
  - `NonExpirableProduct` never expires.
- `storefront.shipping` contains shipping policies:
  - `ShippingPolicy` is the abstract base.
  - `ShippableProduct(weight, shipping_cost)` holds the weight and shipping cost of one unit.
  - `NonShippableProduct` is not shipped.
- `storefront.product` contains `Product`. A product has these fields:
  - `name`
  - `price`
  - `quantity` (the stock)
  - `expiration`
  - `shipping`

  It also has these helpers:
  - `is_expired()`
  - `is_shippable()`
  - `is_available()`
  - `reduce_quantity(amount)`

  And these properties:
  - `expiry_date`, which is `0` for products that never expire
  - `weight` and `shipping_cost`, which are `0.0` for products that are not shipped

  Products compare by identity.
- `storefront.cart` contains `ShoppingCart` and `CartLine`:
  - `add(product, quantity=1)` merges the quantity into any existing line for the same product. It raises `ValueError` when the stock is too low.
  - `remove(product)` removes the product's line.
  - `is_empty()` tells whether the cart has any lines.
  - `total_price()` returns the sum of price × quantity.
  - `shipping_fees()` returns the sum of unit shipping cost × quantity, over shippable lines only.
  - `total_cost()` returns the price plus the shipping fees.
  - `shippable_items()` returns the lines that need shipping.
  - `display_shippable_items()`, `display_receipt()` and `display_checkout_details()` print the shipment notice, the receipt and the totals.
  - `process_shipment()` prints the shipping log.
  - `proceed_checkout()` returns `True` or `False`.
- `storefront.shipping_service` contains `ShippedItem(name, weight)` and `ShippingService`. The service has `add_item` and `process_shipment`, which prints one line per item.
- `storefront.customer` contains `Customer(name, balance)` with these methods:
  - `add_to_cart`
  - `remove_from_cart`
  - `checkout`

  It also defines the checkout errors.
- `storefront.cli` contains `main`, `parse_date` and `print_separator`:
  - `main` runs the demonstration.
  - `parse_date` turns `YYYY-MM-DD` into epoch seconds at local midnight.
  - `print_separator` prints a titled banner.

All printing methods accept an optional `file` argument, which defaults to standard output, so you can capture their output.

### Checkout rules

`Customer.checkout()` returns the remaining balance. When checkout cannot go ahead, it raises a subclass of `CheckoutError`:

- `EmptyCartError` is raised when the cart is empty.
- `InsufficientBalanceError` is raised when the total cost is more than the balance. Nothing changes.
- `ItemUnavailableError` is raised when any line's product has expired, or when its stock no longer covers the quantity ordered.
  - Those lines are removed from the cart.
  - The stock of the other lines is still reduced.
  - The balance is not charged.

A successful checkout goes through these steps:

1. The ordered units are taken out of stock.
2. The checkout details and the shipping log are printed.
3. The cart is emptied.
4. The total is taken from the balance.
5. The remaining balance is printed.

## What it does not do

- It keeps everything in memory. Nothing is stored between runs.
- There is no real payment: a customer's balance is only a number.
- Shipping only prints a log.
- The command runs the built-in scenarios. It offers no interactive shop.