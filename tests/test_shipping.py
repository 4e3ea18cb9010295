import pytest

from storefront.shipping import NonShippableProduct, ShippableProduct, ShippingPolicy


def test_policy_is_abstract():
    with pytest.raises(TypeError):
        ShippingPolicy()


def test_shippable_product_keeps_its_values():
    policy = ShippableProduct(0.5, 3.0)
    assert policy.weight == 0.5
    assert policy.shipping_cost == 3.0


def test_shippable_product_is_shippable():
    assert ShippableProduct(2.5, 25.0).is_shippable() is True


def test_non_shippable_product_is_not_shippable():
    assert NonShippableProduct().is_shippable() is False


def test_shippable_products_compare_by_value():
    assert ShippableProduct(1.2, 5.0) == ShippableProduct(1.2, 5.0)
    assert not ShippableProduct(1.2, 5.0) == ShippableProduct(1.2, 6.0)