"""A shipping service that dispatches named, weighed items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO


@dataclass(frozen=True)
class ShippedItem:
    """An item handed to the shipping service: a name and a total weight."""

    name: str
    weight: float


@dataclass
class ShippingService:
    """Collects items and reports each one as it is shipped."""

    items: list[ShippedItem] = field(default_factory=list)

    def add_item(self, item: ShippedItem) -> None:
        """Queue an item for the next shipment."""
        self.items.append(item)

    def process_shipment(self, file: TextIO | None = None) -> None:
        """Write a line for every queued item to ``file`` (stdout by default)."""
        for item in self.items:
            print(
                f"Processing Shipment for Item Name: {item.name}, "
                f"Weight: {item.weight:g}",
                file=file,
            )