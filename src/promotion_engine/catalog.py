"""Product catalog used to assemble sample carts for the demo."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from promotion_engine.cart import Cart, CartItem


@dataclass
class Product:
    product_id: str
    name: str
    price: float


class CatalogService:
    def __init__(self, products: Optional[Dict[str, Product]] = None) -> None:
        self._products: Dict[str, Product] = products or {
            "A1": Product(product_id="A1", name="Shoes", price=100.0),
            "B2": Product(product_id="B2", name="Hat", price=50.0),
        }

    def get(self, product_id: str) -> Product:
        if product_id not in self._products:
            raise KeyError(f"Unknown product: {product_id}")
        return self._products[product_id]

    def line_item(self, product_id: str, quantity: int) -> CartItem:
        product = self.get(product_id)
        return CartItem(product_id=product.product_id, name=product.name, price=product.price, quantity=quantity)

    def build_cart(self, lines: Iterable[Tuple[str, int]], promo_code: Optional[str] = None) -> Cart:
        return Cart(items=[self.line_item(product_id, quantity) for product_id, quantity in lines], promo_code=promo_code)

    def sample_cart(self) -> Cart:
        return self.build_cart([("A1", 2), ("B2", 1)], promo_code="VIP20")
