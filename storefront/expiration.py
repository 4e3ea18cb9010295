"""Expiry policies that decide whether a product may still be sold."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Expiration(ABC):
    """Policy telling whether a product has gone past its shelf life."""

    @abstractmethod
    def is_expired(self) -> bool:
        """Return True if the product may no longer be sold."""


@dataclass
class ExpirableProduct(Expiration):
    """Expiry policy bound to a fixed moment, as seconds since the epoch."""

    expiry_date: float

    def is_expired(self) -> bool:
        return time.time() > self.expiry_date


class NonExpirableProduct(Expiration):
    """Expiry policy for goods that never expire."""

    def is_expired(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"