# styleshop_sdk/client.py
import os
from typing import Any, Dict, List, Optional

import httpx
import requests
from rich import print

DEFAULT_BASE_URL = os.getenv("STYLESHOP_API_URL", "http://127.0.0.1:5000")


class StoreClient:
    """
    Thin wrapper over the StyleShop REST API.

    Every call raises the HTTP library's status error on a non-2xx response.
    ``session`` may be any requests-compatible client (a ``requests.Session``,
    or FastAPI's ``TestClient`` in tests).
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = 10, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def health(self) -> Dict[str, Any]:
        r = self.session.get(self._url("/health"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Catalog
    def list_products(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {}
        if category:
            params["category"] = category
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Cart
    def get_cart(self) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/api/cart"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def add_to_cart(self, product_id: str, quantity: int = 1) -> Dict[str, Any]:
        r = self.session.post(self._url("/api/cart"), json={
            "productId": product_id, "quantity": quantity
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_cart_item(self, item_id: str, quantity: int) -> Dict[str, Any]:
        r = self.session.put(self._url(f"/api/cart/{item_id}"), json={"quantity": quantity}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def set_quantity(self, item_id: str, quantity: int) -> Dict[str, Any]:
        """Update an item's quantity, removing the item instead when quantity drops to zero or below."""
        if quantity <= 0:
            return self.remove_from_cart(item_id)
        return self.update_cart_item(item_id, quantity)

    def remove_from_cart(self, item_id: str) -> Dict[str, Any]:
        r = self.session.delete(self._url(f"/api/cart/{item_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def clear_cart(self) -> Dict[str, Any]:
        r = self.session.delete(self._url("/api/cart"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Orders
    def place_order(self, customer_info: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        r = self.session.post(self._url("/api/orders"), json={"customerInfo": customer_info}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def list_orders(self) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/api/orders"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    async def add_to_cart_async(self, product_id: str, quantity: int = 1,
                                client: Optional[httpx.AsyncClient] = None) -> Dict[str, Any]:
        """Async add-to-cart. Pass ``client`` to reuse a connection pool (or an ASGI transport)."""
        payload = {"productId": product_id, "quantity": quantity}
        if client is not None:
            r = await client.post(self._url("/api/cart"), json=payload)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as ac:
                r = await ac.post(self._url("/api/cart"), json=payload)
        r.raise_for_status()
        return r.json()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="StyleShop API client")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---------------------------
    # Product commands
    # ---------------------------
    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter by category (or 'all')")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    # ---------------------------
    # Cart commands
    # ---------------------------
    subparsers.add_parser("view-cart", help="View cart contents")

    add = subparsers.add_parser("add-to-cart", help="Add product to cart")
    add.add_argument("--product-id", required=True, help="Product ID")
    add.add_argument("--qty", type=int, default=1, help="Quantity to add")

    up = subparsers.add_parser("set-quantity", help="Set a cart item's quantity (<= 0 removes it)")
    up.add_argument("--item-id", required=True, help="Cart item ID")
    up.add_argument("--qty", type=int, required=True, help="New quantity")

    rm = subparsers.add_parser("remove-from-cart", help="Remove an item from the cart")
    rm.add_argument("--item-id", required=True, help="Cart item ID")

    subparsers.add_parser("clear-cart", help="Empty the cart")

    # ---------------------------
    # Order commands
    # ---------------------------
    po = subparsers.add_parser("place-order", help="Check out the current cart")
    po.add_argument("--name", default="", help="Customer name")
    po.add_argument("--email", default="", help="Customer email")
    po.add_argument("--address", default="", help="Shipping address")

    subparsers.add_parser("list-orders", help="List placed orders")

    args = parser.parse_args()
    c = StoreClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products(args.category))
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "view-cart":
        print(c.get_cart())
    elif args.command == "add-to-cart":
        print(c.add_to_cart(args.product_id, args.qty))
    elif args.command == "set-quantity":
        print(c.set_quantity(args.item_id, args.qty))
    elif args.command == "remove-from-cart":
        print(c.remove_from_cart(args.item_id))
    elif args.command == "clear-cart":
        print(c.clear_cart())
    elif args.command == "place-order":
        print(c.place_order({"name": args.name, "email": args.email, "address": args.address}))
    elif args.command == "list-orders":
        print(c.list_orders())
