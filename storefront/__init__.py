"""A small e-commerce model: products with expiry and shipping policies, shopping carts and customer checkout."""

__version__ = "0.1.0"