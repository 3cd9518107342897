import pytest

from promotion_engine.catalog import CatalogService, Product
from promotion_engine.cart import CartItem


def test_sample_cart_matches_demo_data():
    cart = CatalogService().sample_cart()
    assert cart.items == [CartItem("A1", "Shoes", 100.0, 2), CartItem("B2", "Hat", 50.0, 1)]
    assert cart.promo_code == "VIP20"


def test_unknown_product_raises():
    with pytest.raises(KeyError):
        CatalogService().get("Z9")


def test_custom_catalog():
    catalog = CatalogService({"S1": Product("S1", "Socks", 4.0)})
    cart = catalog.build_cart([("S1", 3)])
    assert cart.items == [CartItem("S1", "Socks", 4.0, 3)]
    assert cart.promo_code is None
