from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Sequence

from shop.errors import ValidationError
from shop.models import Product

ALL_CATEGORIES = "All"


def filter_products(
    products: Iterable[Product], query: str, category: str = ALL_CATEGORIES
) -> List[Product]:
    """
    Products whose name or description contains query (case-insensitive)
    and whose category matches. An empty query and the "All" category match
    everything. Input order is kept.
    """
    needle = query.lower()
    return [
        p
        for p in products
        if (needle in p.name.lower() or needle in p.description.lower())
        and (category == ALL_CATEGORIES or p.category == category)
    ]


def category_options(products: Iterable[Product]) -> List[str]:
    """ "All" followed by each distinct category, in the order first seen."""
    options = [ALL_CATEGORIES]
    for p in products:
        if p.category not in options:
            options.append(p.category)
    return options


class Catalog:
    """Read-only, ordered product list with lookup by id."""

    def __init__(self, products: Sequence[Product]) -> None:
        self._products = tuple(products)
        self._by_id: Dict[str, Product] = {p.id: p for p in self._products}
        if len(self._by_id) != len(self._products):
            raise ValueError("duplicate product ids in catalog")

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def get(self, product_id: str) -> Product:
        try:
            return self._by_id[product_id]
        except KeyError:
            raise ValidationError(
                "product", f"Unknown product: {product_id}"
            ) from None

    def categories(self) -> List[str]:
        return category_options(self._products)

    def search(self, query: str, category: str = ALL_CATEGORIES) -> List[Product]:
        return filter_products(self._products, query, category)
