import json

import pytest

from promotion_engine.promotions import ProductRule, PromoCodeRule, ThresholdRule
from promotion_engine.rules_config import DEFAULT_RULES_CONFIG, build_rule, build_rules, load_rules


def test_default_config_builds_sample_rules():
    assert build_rules(DEFAULT_RULES_CONFIG) == [ThresholdRule(150, 5), ProductRule("A1", 10), PromoCodeRule()]


def test_promo_code_without_table_uses_defaults():
    assert build_rule({"type": "promo_code"}) == PromoCodeRule()


def test_unknown_type_rejected():
    with pytest.raises(ValueError, match="Unknown rule type"):
        build_rule({"type": "bogus"})


def test_missing_key_rejected():
    with pytest.raises(ValueError, match="threshold"):
        build_rule({"type": "threshold", "discount_percent": 5})


def test_load_rules_from_file(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps([{"type": "product", "product_id": "B2", "fixed_discount": 3}]), encoding="utf-8")
    assert load_rules(path) == [ProductRule("B2", 3)]


def test_load_rules_requires_array(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"type": "product"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_rules(path)


@pytest.mark.parametrize(
    "entry",
    [
        {"type": "threshold", "threshold": "150", "discount_percent": 5},
        {"type": "threshold", "threshold": 150, "discount_percent": None},
        {"type": "product", "product_id": "A1", "fixed_discount": "10"},
        {"type": "product", "product_id": 7, "fixed_discount": 10},
        {"type": "promo_code", "codes": {"VIP20": "20"}},
        {"type": "promo_code", "codes": ["VIP20"]},
        {"type": "threshold", "threshold": True, "discount_percent": 5},
        "threshold",
    ],
)
def test_malformed_values_rejected(entry):
    with pytest.raises(ValueError):
        build_rule(entry)


def test_built_promo_rule_keeps_its_own_table():
    entry = {"type": "promo_code", "codes": {"HALF": 50}}
    rule = build_rule(entry)
    entry["codes"]["HALF"] = 100
    assert rule.codes == {"HALF": 50}
