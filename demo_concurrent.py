import asyncio

import httpx
from rich import print

from styleshop_sdk.client import StoreClient


async def simulate_add(client, ac, product_id, qty, n):
    try:
        await client.add_to_cart_async(product_id, qty, client=ac)
        print(f"✅ shopper {n} added {qty} of product {product_id}")
    except httpx.HTTPStatusError as e:
        print(f"❌ shopper {n} failed: {e.response.json().get('message')}")


async def main():
    c = StoreClient()
    c.clear_cart()

    print("\n⚡ Simulating concurrent add-to-cart calls...")
    async with httpx.AsyncClient(timeout=c.timeout) as ac:
        await asyncio.gather(*(
            simulate_add(c, ac, "3", 1, n) for n in range(10)
        ))

    # All ten adds land on one line item
    cart = c.get_cart()
    print("\n🛒 Final cart:", cart)
    print("Line items:", len(cart), "Quantity:", sum(it["quantity"] for it in cart))


if __name__ == "__main__":
    asyncio.run(main())
