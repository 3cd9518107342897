import pytest

from promotion_engine.cart import Cart, CartItem
from promotion_engine.promotions import ProductRule, PromoCodeRule, ThresholdRule


@pytest.fixture
def sample_cart():
    return Cart(
        items=[
            CartItem(product_id="A1", name="Shoes", price=100, quantity=2),
            CartItem(product_id="B2", name="Hat", price=50, quantity=1),
        ],
        promo_code="VIP20",
    )


@pytest.fixture
def sample_rules():
    return [ThresholdRule(150, 5), ProductRule("A1", 10), PromoCodeRule()]


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Attach the test docstring to failure reports."""
    outcome = yield
    rep = outcome.get_result()
    if rep.when == "call" and rep.failed:
        doc = getattr(item.obj, "__doc__", None)
        if doc:
            from inspect import cleandoc

            rep.sections.append(("Test Description", cleandoc(doc)))
