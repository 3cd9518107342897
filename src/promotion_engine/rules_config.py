"""Build promotion rules from plain configuration data."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from promotion_engine.promotions import DEFAULT_PROMO_CODES, ProductRule, PromoCodeRule, PromotionRule, ThresholdRule


DEFAULT_RULES_CONFIG: List[Dict[str, Any]] = [
    {"type": "threshold", "threshold": 150, "discount_percent": 5},
    {"type": "product", "product_id": "A1", "fixed_discount": 10},
    {"type": "promo_code", "codes": dict(DEFAULT_PROMO_CODES)},
]


def _require(entry: Mapping[str, Any], key: str) -> Any:
    if key not in entry:
        raise ValueError(f"Rule {entry.get('type')!r} is missing {key!r}")
    return entry[key]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number(entry: Mapping[str, Any], key: str) -> float:
    value = _require(entry, key)
    if not _is_number(value):
        raise ValueError(f"Rule {entry.get('type')!r}: {key!r} must be a number, got {value!r}")
    return value


def _codes(entry: Mapping[str, Any]) -> Dict[str, float]:
    codes = entry["codes"]
    if not isinstance(codes, Mapping):
        raise ValueError(f"Rule 'promo_code': 'codes' must be an object, got {codes!r}")
    for code, percent in codes.items():
        if not isinstance(code, str) or not _is_number(percent):
            raise ValueError(f"Rule 'promo_code': code {code!r} must map to a number, got {percent!r}")
    return dict(codes)


def build_rule(entry: Mapping[str, Any]) -> PromotionRule:
    if not isinstance(entry, Mapping):
        raise ValueError(f"Rule definitions must be objects, got {entry!r}")
    rule_type = entry.get("type")
    if rule_type == "threshold":
        return ThresholdRule(
            threshold=_number(entry, "threshold"),
            discount_percent=_number(entry, "discount_percent"),
        )
    if rule_type == "product":
        product_id = _require(entry, "product_id")
        if not isinstance(product_id, str):
            raise ValueError(f"Rule 'product': 'product_id' must be a string, got {product_id!r}")
        return ProductRule(product_id=product_id, fixed_discount=_number(entry, "fixed_discount"))
    if rule_type == "promo_code":
        return PromoCodeRule(_codes(entry)) if entry.get("codes") is not None else PromoCodeRule()
    raise ValueError(f"Unknown rule type: {rule_type}")


def build_rules(entries: Iterable[Mapping[str, Any]]) -> List[PromotionRule]:
    return [build_rule(entry) for entry in entries]


def load_rules(path: Path) -> List[PromotionRule]:
    entries = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError(f"{path} must contain a JSON array of rules")
    return build_rules(entries)
