# styleshop/catalog.py
from typing import List

from .models import Product

# Products loaded into the store at startup.
SEED_PRODUCTS: List[Product] = [
    Product(
        id="1",
        name="Classic Cotton T-Shirt",
        category="clothing",
        price=29.99,
        image="https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400&h=400&fit=crop",
        description="Comfortable 100% cotton t-shirt in various colors",
        stock=50,
    ),
    Product(
        id="2",
        name="Denim Jeans",
        category="clothing",
        price=79.99,
        image="https://images.unsplash.com/photo-1542272604-787c3835535d?w=400&h=400&fit=crop",
        description="Classic fit denim jeans with premium quality",
        stock=30,
    ),
    Product(
        id="3",
        name="Running Sneakers",
        category="shoes",
        price=129.99,
        image="https://images.unsplash.com/photo-1549298916-b41d501d3772?w=400&h=400&fit=crop",
        description="Lightweight running shoes with excellent cushioning",
        stock=25,
    ),
    Product(
        id="4",
        name="Leather Boots",
        category="shoes",
        price=189.99,
        image="https://images.unsplash.com/photo-1608256246200-53e635b5b65f?w=400&h=400&fit=crop",
        description="Genuine leather boots for durability and style",
        stock=15,
    ),
    Product(
        id="5",
        name="Canvas Backpack",
        category="bags",
        price=59.99,
        image="https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=400&h=400&fit=crop",
        description="Durable canvas backpack perfect for daily use",
        stock=40,
    ),
    Product(
        id="6",
        name="Leather Handbag",
        category="bags",
        price=149.99,
        image="https://images.unsplash.com/photo-1584917865442-de89df76afd3?w=400&h=400&fit=crop",
        description="Elegant leather handbag for professional settings",
        stock=20,
    ),
    Product(
        id="7",
        name="Summer Dress",
        category="clothing",
        price=69.99,
        image="https://images.unsplash.com/photo-1595777457583-95e059d581b8?w=400&h=400&fit=crop",
        description="Light and breezy summer dress for warm weather",
        stock=35,
    ),
    Product(
        id="8",
        name="Casual Loafers",
        category="shoes",
        price=99.99,
        image="https://images.unsplash.com/photo-1614252369475-531eba835eb1?w=400&h=400&fit=crop",
        description="Comfortable loafers for casual occasions",
        stock=28,
    ),
]
