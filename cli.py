# cli.py - interactive StyleShop storefront
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from styleshop_sdk.client import StoreClient

console = Console()
c = StoreClient()

# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []
cart_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Cart arithmetic (client side, display only)
# ---------------------------
def cart_count(cart: List[Dict[str, Any]]) -> int:
    return sum(int(it.get("quantity", 0)) for it in cart)


def cart_total(cart: List[Dict[str, Any]]) -> float:
    return sum(float(it.get("price", 0)) * int(it.get("quantity", 0)) for it in cart)


def format_price(amount: float) -> str:
    return f"${amount:.2f}"


def category_choices(products: List[Dict[str, Any]]) -> List[str]:
    return ["all"] + sorted({p["category"] for p in products if p.get("category")})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], category: str = "all"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=f"Products ({category})",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=4)
    table.add_column("Name", style="bold", width=24)
    table.add_column("Category", width=10)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Stock", justify="right", width=7)

    for p in products:
        stock = p.get("stock", 0)
        table.add_row(
            p.get("id", "N/A"),
            p.get("name", "N/A"),
            p.get("category", "N/A"),
            format_price(p.get("price", 0)),
            str(stock) if stock else "[red]Out of stock[/red]"
        )
    console.print(table)


def show_product(product: Dict[str, Any]):
    body = Text()
    body.append(f"{product.get('name', 'N/A')}\n", style="bold")
    body.append(f"{format_price(product.get('price', 0))}\n", style="bold green")
    body.append(f"{product.get('description', '')}\n\n")
    body.append(f"Category: {product.get('category', 'N/A')}   Stock: {product.get('stock', 0)}\n", style="dim")
    body.append(product.get("image", ""), style="dim underline")
    console.print(Panel(body, title=f"Product {product.get('id', '?')}", border_style="cyan"))


def show_cart(cart: List[Dict[str, Any]]):
    title = Text()
    title.append("Your Cart", style="bold")
    title.append(f" - Total: {format_price(cart_total(cart))}", style="bold green")

    if not cart:
        console.print(Panel("Your cart is empty", title=title, style="blue"))
        return

    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("#", style="dim", width=3)
    table.add_column("Product", style="bold", width=26)
    table.add_column("Qty", justify="right", width=5)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Subtotal", justify="right", width=10)

    for idx, it in enumerate(cart, start=1):
        price = float(it.get("price", 0))
        qty = int(it.get("quantity", 0))
        table.add_row(str(idx), it.get("name", "Unknown"), str(qty), format_price(price), format_price(price * qty))

    console.print(Panel(table, title=title, border_style="blue"))


def show_order(order: Dict[str, Any]):
    info = order.get("customerInfo") or {}
    console.print(Panel.fit(
        f"[green]Order placed successfully![/green]\n"
        f"Order ID: [bold]{order.get('id', 'N/A')}[/bold]\n"
        f"Ship to: {info.get('name', '')} <{info.get('email', '')}>\n"
        f"Total: [bold]{format_price(order.get('total', 0))}[/bold]",
        title="Order Confirmation"
    ))


def show_orders(orders: List[Dict[str, Any]]):
    if not orders:
        console.print("[italic yellow]No orders found[/italic yellow]")
        return

    table = Table(
        title="Orders",
        box=box.ROUNDED,
        header_style="bold yellow",
        title_style="bold yellow",
        show_lines=True
    )
    table.add_column("Order ID", style="dim", width=14)
    table.add_column("Contents", width=40)
    table.add_column("Customer", width=18)
    table.add_column("Status", width=10)
    table.add_column("Total", justify="right", width=10)

    for order in orders:
        items = order.get("items", [])
        names = [f"{it.get('name', '?')} x{it.get('quantity', 1)}" for it in items[:3]]
        contents = ", ".join(names) if names else "No items"
        if len(items) > 3:
            contents += f" +{len(items) - 3} more"
        customer = (order.get("customerInfo") or {}).get("name") or "-"

        table.add_row(
            order.get("id", "N/A")[:12] + "...",
            contents,
            customer,
            f"[yellow]{order.get('status', 'N/A')}[/yellow]",
            format_price(order.get("total", 0))
        )

    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the decoded result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
        return result
    except Exception as e:
        status_message = f"Error: {error_message(e)}"
        console.print(show_status(status_message, False))
        return None


def error_message(exc: Exception) -> str:
    """Prefer the API's ``{"message": ...}`` body over the raw exception text."""
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            return response.json().get("message", str(exc))
        except ValueError:
            pass
    return str(exc)


def refresh_cart() -> List[Dict[str, Any]]:
    global cart_cache
    cart = try_api(c.get_cart)
    if cart is not None:
        cart_cache = cart
    return cart_cache


# ---------------------------
# Input helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    names = [p.get("name", "") for p in product_cache]
    ids = [p.get("id", "") for p in product_cache]
    return WordCompleter([n for n in (names + ids) if n], ignore_case=True)


def resolve_product_id(raw: str) -> str:
    """Accept either a product id or a product name typed at the prompt."""
    for p in product_cache:
        if raw.lower() == p.get("name", "").lower():
            return p["id"]
    return raw


def pick_cart_item(cart: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not cart:
        console.print("[italic yellow]Your cart is empty[/italic yellow]")
        return None
    show_cart(cart)
    idx = IntPrompt.ask("Item #", default=1)
    if 1 <= idx <= len(cart):
        return cart[idx - 1]
    console.print("[red]No such item.[/red]")
    return None


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def checkout_form() -> Optional[Dict[str, str]]:
    console.print(Panel.fit("Shipping details", title="Checkout", border_style="green"))
    info = {}
    for field, label in (("name", "Full Name"), ("email", "Email"), ("address", "Shipping Address")):
        value = ""
        while not value.strip():
            value = Prompt.ask(label)
        info[field] = value.strip()
    if not Confirm.ask("Place order?"):
        return None
    return info


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "[bold]StyleShop[/bold]",
        f"[bold blue]Cart ({cart_count(cart_cache)})[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    product_cache = try_api(c.list_products) or []
    refresh_cart()

    while True:
        console.print(create_header())
        if status_message:
            console.print(show_status(status_message, not status_message.startswith("Error")))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "Browse products", "6", "Change quantity"),
            ("2", "Product details", "7", "Remove item"),
            ("3", "Add to cart", "8", "Clear cart"),
            ("4", "View cart", "9", "Checkout"),
            ("5", "Increase / decrease item", "10", "Order history"),
            ("", "", "q", "Quit")
        ]
        for row in options:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 11)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete(
                "Category", completer=WordCompleter(category_choices(product_cache), ignore_case=True), default="all"
            ).strip() or "all"
            products = try_api(c.list_products, category, success_msg="Products loaded")
            if products is not None:
                if category == "all":
                    product_cache = products
                show_products(products, category)

        elif choice == "2":
            pid = resolve_product_id(prompt_with_autocomplete("Product", completer=get_product_completer()))
            product = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
            if product:
                show_product(product)

        elif choice == "3":
            pid = resolve_product_id(prompt_with_autocomplete("Product", completer=get_product_completer()))
            qty = IntPrompt.ask("Quantity", default=1)
            if try_api(c.add_to_cart, pid, qty, success_msg="Item added to cart") is not None:
                show_cart(refresh_cart())

        elif choice == "4":
            show_cart(refresh_cart())

        elif choice == "5":
            item = pick_cart_item(refresh_cart())
            if item:
                step = 1 if Confirm.ask(f"Increase {item['name']}? (no = decrease)") else -1
                try_api(c.set_quantity, item["id"], item["quantity"] + step, success_msg="Cart updated")
                show_cart(refresh_cart())

        elif choice == "6":
            item = pick_cart_item(refresh_cart())
            if item:
                qty = IntPrompt.ask("New quantity (0 removes)", default=item["quantity"])
                try_api(c.set_quantity, item["id"], qty, success_msg="Cart updated")
                show_cart(refresh_cart())

        elif choice == "7":
            item = pick_cart_item(refresh_cart())
            if item:
                try_api(c.remove_from_cart, item["id"], success_msg=f"{item['name']} removed")
                show_cart(refresh_cart())

        elif choice == "8":
            if Confirm.ask("[red]Remove everything from your cart?[/red]"):
                try_api(c.clear_cart, success_msg="Cart cleared")
                refresh_cart()

        elif choice == "9":
            cart = refresh_cart()
            if not cart:
                console.print("[italic yellow]Your cart is empty[/italic yellow]")
            else:
                show_cart(cart)
                info = checkout_form()
                if info:
                    resp = try_api(c.place_order, info, success_msg="Order placed")
                    if resp:
                        show_order(resp["order"])
                    refresh_cart()

        elif choice == "10":
            orders = try_api(c.list_orders, success_msg="Orders loaded")
            if orders is not None:
                show_orders(orders)

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Thanks for shopping at StyleShop![/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
