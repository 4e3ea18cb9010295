import time

import pytest

from storefront.expiration import Expiration, ExpirableProduct, NonExpirableProduct


def test_expiration_is_abstract():
    with pytest.raises(TypeError):
        Expiration()


def test_past_date_is_expired():
    policy = ExpirableProduct(time.time() - 86_400)
    assert policy.is_expired() is True


def test_future_date_is_not_expired():
    policy = ExpirableProduct(time.time() + 86_400)
    assert policy.is_expired() is False


def test_expiry_date_can_be_changed():
    policy = ExpirableProduct(time.time() + 86_400)
    policy.expiry_date = time.time() - 86_400
    assert policy.is_expired() is True


def test_expiry_date_is_kept():
    stamp = 1_700_000_000
    assert ExpirableProduct(stamp).expiry_date == stamp


def test_non_expirable_never_expires():
    assert NonExpirableProduct().is_expired() is False