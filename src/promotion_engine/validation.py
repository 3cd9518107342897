"""Optional input checks run by callers before handing a cart to the engine."""
from __future__ import annotations

from typing import Iterable, List

from promotion_engine.cart import Cart


class CartValidationError(ValueError):
    def __init__(self, problems: List[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems


def cart_problems(cart: Cart) -> List[str]:
    problems: List[str] = []
    for index, item in enumerate(cart.items):
        label = item.product_id or f"item[{index}]"
        if not item.product_id:
            problems.append(f"{label}: product_id must not be empty")
        if item.price < 0:
            problems.append(f"{label}: price must not be negative")
        if isinstance(item.quantity, bool) or not isinstance(item.quantity, int):
            problems.append(f"{label}: quantity must be an integer")
        elif item.quantity < 0:
            problems.append(f"{label}: quantity must not be negative")
    return problems


def validate_cart(cart: Cart) -> Cart:
    problems = cart_problems(cart)
    if problems:
        raise CartValidationError(problems)
    return cart


def validate_rules(rules: Iterable[object]) -> None:
    for rule in rules:
        if not callable(getattr(rule, "process", None)):
            raise ValueError(f"{type(rule).__name__} does not implement process(cart)")
