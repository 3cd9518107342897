"""Cart model shared by the promotion rules and the engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


@dataclass
class CartItem:
    product_id: str
    name: str
    price: float
    quantity: int

    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass
class Cart:
    items: List[CartItem] = field(default_factory=list)
    promo_code: Optional[str] = None


def cart_total(cart: Cart) -> float:
    """Sum price x quantity over every line item, left to right from zero."""
    total = 0
    for item in cart.items:
        total += item.subtotal()
    return total


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


def _numeric(raw: Mapping[str, Any], key: str) -> Any:
    value = _pick(raw, key, default=0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Cart item {key!r} must be a number, got {value!r}")
    return value


def cart_from_dict(data: Mapping[str, Any]) -> Cart:
    """Build a cart from JSON-style data, accepting camelCase or snake_case keys.

    Non-numeric prices or quantities raise ``ValueError`` here so they never
    reach the rules.
    """
    items = [
        CartItem(
            product_id=_pick(raw, "product_id", "productId", default=""),
            name=_pick(raw, "name", default=""),
            price=_numeric(raw, "price"),
            quantity=_numeric(raw, "quantity"),
        )
        for raw in data.get("items", [])
    ]
    return Cart(items=items, promo_code=_pick(data, "promo_code", "promoCode"))
