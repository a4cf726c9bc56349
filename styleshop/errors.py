# styleshop/errors.py
from typing import Optional


class StoreError(Exception):
    """Base for errors the API turns into a ``{"message": ...}`` response."""
    status_code = 400
    message = "request failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ProductNotFound(StoreError):
    status_code = 404
    message = "Product not found"


class CartItemNotFound(StoreError):
    status_code = 404
    message = "Cart item not found"


class CartEmpty(StoreError):
    status_code = 400
    message = "Cart is empty"


class InvalidQuantity(StoreError):
    status_code = 400
    message = "quantity must be > 0"
