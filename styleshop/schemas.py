# styleshop/schemas.py
from typing import List, Optional

from .models import CamelModel, CartItem, CustomerInfo, Order


class AddToCartIn(CamelModel):
    product_id: str
    quantity: int = 1


class UpdateCartIn(CamelModel):
    quantity: int


class PlaceOrderIn(CamelModel):
    customer_info: Optional[CustomerInfo] = None


class MessageOut(CamelModel):
    message: str


class CartOut(MessageOut):
    cart: List[CartItem]


class OrderOut(MessageOut):
    order: Order
