#!/usr/bin/env python3
"""
Price a cart with the promotion engine and print the breakdown as JSON.

Without arguments the sample catalog cart (2x Shoes, 1x Hat, code VIP20) is
priced with the default rule set.

Env:
  PROMO_DEMO_RULES may point at a JSON rules file when --rules-file is not given.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
from dataclasses import asdict, replace
from pathlib import Path
from typing import List, Optional

from promotion_engine.audit import AuditLogger
from promotion_engine.cart import Cart, cart_from_dict
from promotion_engine.catalog import CatalogService
from promotion_engine.engine import PromotionEngine
from promotion_engine.promotions import PromotionRule
from promotion_engine.rules_config import DEFAULT_RULES_CONFIG, build_rules, load_rules
from promotion_engine.validation import validate_cart


def read_cart(path: Optional[Path]) -> Cart:
    if path is None:
        return CatalogService().sample_cart()
    return cart_from_dict(json.loads(path.read_text(encoding="utf-8")))


def read_rules(path: Optional[Path]) -> List[PromotionRule]:
    if path is None:
        env_path = os.getenv("PROMO_DEMO_RULES")
        path = Path(env_path) if env_path else None
    if path is None:
        return build_rules(DEFAULT_RULES_CONFIG)
    return load_rules(path)


def run(argv: Optional[List[str]] = None) -> dict:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--cart-file", type=Path, help="JSON cart with items and an optional promoCode")
    parser.add_argument("--rules-file", type=Path, help="JSON array of rule definitions")
    parser.add_argument("--promo-code", help="Override the cart's promo code")
    parser.add_argument("--validate", action="store_true", help="Reject carts with malformed items")
    parser.add_argument("--verbose", action="store_true", help="Log each rule contribution")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        cart = read_cart(args.cart_file)
        rules = read_rules(args.rules_file)
        if args.promo_code is not None:
            cart = replace(cart, promo_code=args.promo_code)
        if args.validate:
            validate_cart(cart)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"promotion_demo: {exc}")

    audit = AuditLogger()
    result = PromotionEngine(rules, audit=audit).process_discount(cart)
    output = asdict(result)
    output["rules"] = [{"rule": entry.rule, "amount": entry.amount} for entry in audit.for_event("rule_applied")]
    return output


def main() -> None:
    print(json.dumps(run(), indent=2))


if __name__ == "__main__":
    main()
