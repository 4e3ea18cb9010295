import io

import pytest

from storefront.shipping_service import ShippedItem, ShippingService


def test_shipped_item_is_immutable():
    item = ShippedItem("Books Set", 2.4)
    with pytest.raises(AttributeError):
        item.name = "Other"
    assert item.name == "Books Set"
    assert item.weight == 2.4


def test_add_item_keeps_order():
    service = ShippingService()
    first = ShippedItem("Cheddar Cheese", 1.5)
    second = ShippedItem("Gaming Laptop", 2.5)
    service.add_item(first)
    service.add_item(second)
    assert service.items == [first, second]


def test_process_shipment_writes_one_line_per_item():
    service = ShippingService()
    service.add_item(ShippedItem("Cheddar Cheese", 1.5))
    service.add_item(ShippedItem("Gaming Laptop", 2.5))
    out = io.StringIO()
    service.process_shipment(out)
    assert out.getvalue().splitlines() == [
        "Processing Shipment for Item Name: Cheddar Cheese, Weight: 1.5",
        "Processing Shipment for Item Name: Gaming Laptop, Weight: 2.5",
    ]


def test_whole_weights_print_without_fraction():
    service = ShippingService()
    service.add_item(ShippedItem("Premium Beef", 6.0))
    out = io.StringIO()
    service.process_shipment(out)
    assert out.getvalue() == "Processing Shipment for Item Name: Premium Beef, Weight: 6\n"


def test_empty_service_writes_nothing():
    out = io.StringIO()
    ShippingService().process_shipment(out)
    assert out.getvalue() == ""


def test_default_output_is_stdout(capsys):
    service = ShippingService()
    service.add_item(ShippedItem("Books Set", 2.4))
    service.process_shipment()
    assert "Item Name: Books Set, Weight: 2.4" in capsys.readouterr().out