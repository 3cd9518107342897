"""Promotion engine that sums every configured rule into one discount."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from promotion_engine.audit import AuditLogger
from promotion_engine.cart import Cart, cart_total
from promotion_engine.promotions import PromotionRule

logger = logging.getLogger(__name__)


@dataclass
class PromotionBreakdown:
    total: float
    discount: float
    final: float


@dataclass
class RuleContribution:
    rule: str
    amount: float


def rule_name(rule: PromotionRule) -> str:
    return type(rule).__name__


class PromotionEngine:
    """Applies all configured promotion rules to a cart.

    Rules are fixed at construction and evaluated in the order given. The
    engine keeps no state between calls, so one instance can price any number
    of carts. The final price is not clamped and goes negative when the
    discounts exceed the cart total.
    """

    def __init__(self, rules: Iterable[PromotionRule], audit: Optional[AuditLogger] = None) -> None:
        self._rules = tuple(rules)
        self._audit = audit

    @property
    def rules(self) -> Tuple[PromotionRule, ...]:
        return self._rules

    def contributions(self, cart: Cart) -> List[RuleContribution]:
        return [RuleContribution(rule=rule_name(rule), amount=rule.process(cart)) for rule in self._rules]

    def discount_calculation(self, cart: Cart) -> float:
        discount = 0
        for rule in self._rules:
            amount = rule.process(cart)
            logger.debug("%s contributed %s", rule_name(rule), amount)
            if self._audit is not None:
                self._audit.log("rule_applied", rule_name(rule), amount, repr(rule))
            discount += amount
        return discount

    def process_discount(self, cart: Cart) -> PromotionBreakdown:
        total = cart_total(cart)
        discount = self.discount_calculation(cart)
        breakdown = PromotionBreakdown(total=total, discount=discount, final=total - discount)
        logger.debug("Processed cart: %s", breakdown)
        if self._audit is not None:
            self._audit.log(
                "discount_processed",
                None,
                discount,
                f"total={breakdown.total}, final={breakdown.final}",
            )
        return breakdown
