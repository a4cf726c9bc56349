# tests/test_concurrency.py
import asyncio

import httpx

from styleshop.main import app
from styleshop.store import store


async def _add_task(ac, product_id):
    return await ac.post("/api/cart", json={"productId": product_id, "quantity": 1})


async def _run_adds(n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*(_add_task(ac, "3") for _ in range(n)))


def test_concurrent_adds_merge_into_one_item():
    # checks the merge under interleaved requests; lock blocking is covered in test_store.py
    results = asyncio.run(_run_adds(20))
    assert all(r.status_code == 200 for r in results)
    cart = store.get_cart()
    assert len(cart) == 1
    assert cart[0].quantity == 20
