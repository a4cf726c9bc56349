# styleshop/models.py
from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    id: str
    name: str
    category: str
    price: float = Field(ge=0)
    image: str
    description: str = ""
    stock: int = Field(default=0, ge=0)


class CartItem(CamelModel):
    id: str
    product_id: str
    name: str
    price: float
    image: str
    quantity: int


class CustomerInfo(CamelModel):
    name: str = ""
    email: str = ""
    address: str = ""


class Order(CamelModel):
    id: str
    items: List[CartItem]
    total: float
    customer_info: Optional[CustomerInfo] = None
    status: Literal["pending"] = "pending"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
