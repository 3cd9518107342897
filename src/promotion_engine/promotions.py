"""Promotion rules evaluated against a cart."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Protocol

from promotion_engine.cart import Cart, cart_total


DEFAULT_PROMO_CODES: Mapping[str, float] = MappingProxyType({
    "SUMMER10": 10,
    "VIP20": 20,
})


class PromotionRule(Protocol):
    def process(self, cart: Cart) -> float:
        ...


@dataclass(frozen=True)
class ThresholdRule:
    """Percentage off the whole cart once its total reaches the threshold."""

    threshold: float
    discount_percent: float

    def process(self, cart: Cart) -> float:
        total = cart_total(cart)
        return total * (self.discount_percent / 100) if total >= self.threshold else 0


@dataclass(frozen=True)
class ProductRule:
    """Fixed amount off every unit of one product.

    Only the first line item carrying ``product_id`` is considered.
    """

    product_id: str
    fixed_discount: float

    def process(self, cart: Cart) -> float:
        item = next((item for item in cart.items if item.product_id == self.product_id), None)
        return self.fixed_discount * item.quantity if item else 0


@dataclass(frozen=True)
class PromoCodeRule:
    """Percentage off the whole cart for a recognised promo code.

    The code table is copied on construction; later changes to the mapping
    passed in do not reach the rule.
    """

    codes: Mapping[str, float] = field(default_factory=lambda: DEFAULT_PROMO_CODES)

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes", MappingProxyType(dict(self.codes)))

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.codes.items())))

    def process(self, cart: Cart) -> float:
        percent = self.codes.get(cart.promo_code or "", 0)
        return cart_total(cart) * (percent / 100)
