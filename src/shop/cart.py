from __future__ import annotations

from decimal import Decimal
from typing import Iterator, List, Optional

from shop.errors import OutOfStockError
from shop.models import CartItem, Product
from utils.logger import get_logger

_logger = get_logger(__name__)


class Cart:
    """
    The session's cart: one CartItem per product id, kept in the order
    products were first added. Totals are always computed from the items.
    """

    def __init__(self) -> None:
        self._items: List[CartItem] = []

    def __iter__(self) -> Iterator[CartItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def items(self) -> List[CartItem]:
        """Snapshot copies, so callers can't bump quantities behind our back."""
        return [CartItem(item.product, item.quantity) for item in self._items]

    def _find(self, product_id: str) -> Optional[CartItem]:
        for item in self._items:
            if item.id == product_id:
                return item
        return None

    def quantity_of(self, product_id: str) -> int:
        item = self._find(product_id)
        return item.quantity if item else 0

    def add(self, product: Product) -> int:
        """Add one unit. Returns the new quantity."""
        if not product.in_stock:
            _logger.info(f"Rejected add of out-of-stock product {product.id}")
            raise OutOfStockError(product)

        item = self._find(product.id)
        if item:
            item.quantity += 1
        else:
            item = CartItem(product, 1)
            self._items.append(item)
        _logger.debug(f"Cart: {product.id} x{item.quantity}")
        return item.quantity

    def remove(self, product: Product) -> int:
        """Take one unit away, dropping the entry at zero. Returns the new quantity."""
        item = self._find(product.id)
        if item is None:
            return 0

        if item.quantity == 1:
            self._items.remove(item)
            _logger.debug(f"Cart: {product.id} removed")
            return 0

        item.quantity -= 1
        _logger.debug(f"Cart: {product.id} x{item.quantity}")
        return item.quantity

    def clear(self) -> None:
        self._items.clear()

    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def total(self) -> Decimal:
        return sum((item.subtotal() for item in self._items), Decimal("0"))
