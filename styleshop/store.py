# styleshop/store.py
import asyncio
import logging
import uuid
from typing import Iterable, List, Optional

from .catalog import SEED_PRODUCTS
from .errors import CartEmpty, CartItemNotFound, InvalidQuantity, ProductNotFound
from .models import CartItem, CustomerInfo, Order, Product

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


class Store:
    """
    In-memory catalog, cart and order book for a single implicit shopper.

    Every mutation runs under one asyncio lock. Reads hand out copies so
    callers can never change stored state behind the lock's back.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._seed: List[Product] = list(SEED_PRODUCTS if products is None else products)
        self._lock = asyncio.Lock()
        self._products: List[Product] = []
        self._cart: List[CartItem] = []
        self._orders: List[Order] = []
        self.reset()

    def reset(self) -> None:
        """Restore the startup state: seeded catalog, empty cart, no orders."""
        self._products = [p.model_copy() for p in self._seed]
        self._cart = []
        self._orders = []

    # ---------------------------
    # Catalog
    # ---------------------------
    def list_products(self, category: Optional[str] = None) -> List[Product]:
        if not category or category == ALL_CATEGORIES:
            return [p.model_copy() for p in self._products]
        return [p.model_copy() for p in self._products if p.category == category]

    def get_product(self, product_id: str) -> Product:
        return self._find_product(product_id).model_copy()

    def _find_product(self, product_id: str) -> Product:
        for p in self._products:
            if p.id == product_id:
                return p
        raise ProductNotFound()

    # ---------------------------
    # Cart
    # ---------------------------
    def get_cart(self) -> List[CartItem]:
        return [item.model_copy() for item in self._cart]

    async def add_to_cart(self, product_id: str, quantity: int = 1) -> List[CartItem]:
        _check_quantity(quantity)
        async with self._lock:
            product = self._find_product(product_id)
            existing = next((i for i in self._cart if i.product_id == product_id), None)
            if existing:
                existing.quantity += quantity
            else:
                self._cart.append(CartItem(
                    id=uuid.uuid4().hex,
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    image=product.image,
                    quantity=quantity,
                ))
            logger.info("item added to cart", extra={"product_id": product_id, "quantity": quantity})
            return self.get_cart()

    async def update_cart_item(self, item_id: str, quantity: int) -> List[CartItem]:
        _check_quantity(quantity)
        async with self._lock:
            item = next((i for i in self._cart if i.id == item_id), None)
            if item is None:
                raise CartItemNotFound()
            item.quantity = quantity
            return self.get_cart()

    async def remove_cart_item(self, item_id: str) -> List[CartItem]:
        # unknown ids are a no-op
        async with self._lock:
            self._cart = [i for i in self._cart if i.id != item_id]
            return self.get_cart()

    async def clear_cart(self) -> None:
        async with self._lock:
            self._cart = []
            logger.info("cart cleared")

    # ---------------------------
    # Orders
    # ---------------------------
    async def place_order(self, customer_info: Optional[CustomerInfo] = None) -> Order:
        async with self._lock:
            if not self._cart:
                raise CartEmpty()
            items = [item.model_copy() for item in self._cart]
            order = Order(
                id=uuid.uuid4().hex,
                items=items,
                total=cart_total(items),
                customer_info=customer_info,
            )
            self._orders.append(order)
            self._cart = []
            logger.info("order placed", extra={"order_id": order.id, "total": order.total})
            return order.model_copy(deep=True)

    def list_orders(self) -> List[Order]:
        return [o.model_copy(deep=True) for o in self._orders]


def cart_total(items: Iterable[CartItem]) -> float:
    """Plain float sum of price x quantity; no rounding to cents."""
    return sum(i.price * i.quantity for i in items)


def _check_quantity(quantity: int) -> None:
    if quantity <= 0:
        raise InvalidQuantity()


# Process-wide store used by the API.
store = Store()
