# tests/test_store.py
import asyncio

import pytest

from styleshop.errors import CartEmpty, CartItemNotFound, InvalidQuantity, ProductNotFound
from styleshop.models import CustomerInfo, Product
from styleshop.store import Store, cart_total

PRODUCTS = [
    Product(id="a", name="Hat", category="hats", price=10.10, image="hat.png", stock=3),
    Product(id="b", name="Scarf", category="scarves", price=0.1, image="scarf.png", stock=1),
]


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def shop():
    return Store(PRODUCTS)


def test_reads_return_copies(shop):
    shop.list_products()[0].name = "changed"
    shop.get_product("a").price = 0
    assert shop.get_product("a").name == "Hat"
    assert shop.get_product("a").price == 10.10

    run(shop.add_to_cart("a"))
    shop.get_cart()[0].quantity = 99
    assert shop.get_cart()[0].quantity == 1


def test_get_product_missing(shop):
    with pytest.raises(ProductNotFound):
        shop.get_product("zzz")


def test_add_merges_by_product(shop):
    run(shop.add_to_cart("a", 1))
    cart = run(shop.add_to_cart("a", 2))
    assert len(cart) == 1
    assert cart[0].quantity == 3


def test_quantity_must_be_positive(shop):
    with pytest.raises(InvalidQuantity):
        run(shop.add_to_cart("a", -1))
    item = run(shop.add_to_cart("a"))[0]
    with pytest.raises(InvalidQuantity):
        run(shop.update_cart_item(item.id, 0))


def test_update_missing_item(shop):
    with pytest.raises(CartItemNotFound):
        run(shop.update_cart_item("missing", 1))


def test_place_order_total_is_raw_sum(shop):
    run(shop.add_to_cart("a", 2))
    run(shop.add_to_cart("b", 3))
    order = run(shop.place_order(CustomerInfo(name="Bob")))
    assert order.total == 10.10 * 2 + 0.1 * 3
    assert order.status == "pending"
    assert shop.get_cart() == []


def test_place_order_empty_cart(shop):
    with pytest.raises(CartEmpty):
        run(shop.place_order())
    assert shop.list_orders() == []


def test_orders_are_snapshots(shop):
    run(shop.add_to_cart("a"))
    run(shop.place_order())
    shop.list_orders()[0].items[0].quantity = 50
    assert shop.list_orders()[0].items[0].quantity == 1


def test_reset_restores_startup_state(shop):
    run(shop.add_to_cart("a"))
    run(shop.place_order())
    run(shop.add_to_cart("b"))
    shop.reset()
    assert shop.get_cart() == []
    assert shop.list_orders() == []
    assert [p.id for p in shop.list_products()] == ["a", "b"]


def test_cart_total_empty():
    assert cart_total([]) == 0


def test_mutations_wait_for_the_lock(shop):
    async def go():
        await shop._lock.acquire()
        task = asyncio.create_task(shop.add_to_cart("a"))
        await asyncio.sleep(0)
        blocked = shop.get_cart()
        shop._lock.release()
        await task
        return blocked, shop.get_cart()

    blocked, after = run(go())
    assert blocked == []
    assert [i.quantity for i in after] == [1]
