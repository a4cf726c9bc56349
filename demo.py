#!/usr/bin/env python
from rich import print

from styleshop_sdk.client import StoreClient


def main():
    c = StoreClient()

    # -----------------------------
    # Browse the catalog
    # -----------------------------
    print("\nListing all products...")
    print(c.list_products())

    print("\nListing shoes...")
    shoes = c.list_products("shoes")
    print(shoes)

    # -----------------------------
    # Fill the cart
    # -----------------------------
    print("\nAdding products to cart...")
    print(c.add_to_cart("1"))
    print(c.add_to_cart("1", 2))
    print(c.add_to_cart(shoes[0]["id"]))

    print("\nViewing cart...")
    cart = c.get_cart()
    print(cart)

    print("\nBumping the t-shirt to 4...")
    tshirt = next(it for it in cart if it["productId"] == "1")
    print(c.set_quantity(tshirt["id"], 4))

    # -----------------------------
    # Check out
    # -----------------------------
    print("\nPlacing order...")
    print(c.place_order({
        "name": "Alice Example",
        "email": "alice@example.com",
        "address": "1 Main Street",
    }))

    print("\nCart after checkout...")
    print(c.get_cart())

    print("\nListing all orders...")
    print(c.list_orders())


if __name__ == "__main__":
    main()
