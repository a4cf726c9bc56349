# styleshop/main.py
import logging
from pathlib import Path
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .errors import StoreError
from .logging_config import setup_logging
from .models import CartItem, Order, Product
from .schemas import AddToCartIn, CartOut, MessageOut, OrderOut, PlaceOrderIn, UpdateCartIn
from .store import store

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, version=settings.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def strip_api_trailing_slash(request: Request, call_next):
    """Send `/api/.../` to `/api/...`; the client catch-all would otherwise claim it."""
    path = request.url.path
    if path.startswith("/api/") and path.endswith("/"):
        return RedirectResponse(url=str(request.url.replace(path=path.rstrip("/"))), status_code=307)
    return await call_next(request)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.warning(exc.message, extra={"path": request.url.path, "status_code": exc.status_code})
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.get("/health")
async def health():
    return {"status": "healthy"}


# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/api/products", response_model=List[Product])
async def list_products(category: Optional[str] = None):
    return store.list_products(category)


@app.get("/api/products/{product_id}", response_model=Product)
async def get_product(product_id: str):
    return store.get_product(product_id)


# ---------------------------
# Cart endpoints
# ---------------------------
@app.get("/api/cart", response_model=List[CartItem])
async def get_cart():
    return store.get_cart()


@app.post("/api/cart", response_model=CartOut)
async def add_to_cart(payload: AddToCartIn):
    cart = await store.add_to_cart(payload.product_id, payload.quantity)
    return {"message": "Item added to cart", "cart": cart}


@app.put("/api/cart/{item_id}", response_model=CartOut)
async def update_cart_item(item_id: str, payload: UpdateCartIn):
    cart = await store.update_cart_item(item_id, payload.quantity)
    return {"message": "Cart updated", "cart": cart}


@app.delete("/api/cart/{item_id}", response_model=CartOut)
async def remove_cart_item(item_id: str):
    cart = await store.remove_cart_item(item_id)
    return {"message": "Item removed from cart", "cart": cart}


@app.delete("/api/cart", response_model=MessageOut)
async def clear_cart():
    await store.clear_cart()
    return {"message": "Cart cleared"}


# ---------------------------
# Orders
# ---------------------------
@app.post("/api/orders", response_model=OrderOut)
async def place_order(payload: Optional[PlaceOrderIn] = None):
    # a bodyless checkout places an order without customer details
    order = await store.place_order(payload.customer_info if payload else None)
    return {"message": "Order placed successfully", "order": order}


@app.get("/api/orders", response_model=List[Order])
async def list_orders():
    return store.list_orders()


# ---------------------------
# Client application
# ---------------------------
if Path(settings.UPLOADS_DIR).is_dir():
    app.mount("/uploads", StaticFiles(directory=settings.UPLOADS_DIR), name="uploads")


def _not_found():
    return JSONResponse(status_code=404, content={"message": "Not found"})


@app.get("/{full_path:path}", include_in_schema=False)
async def serve_client(full_path: str):
    """Serve a file from the client bundle, else its index.html for client-side routes."""
    if full_path == "api" or full_path.startswith("api/"):
        return _not_found()

    root = Path(settings.STATIC_DIR).resolve()
    if full_path:
        candidate = (root / full_path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)

    index = root / "index.html"
    if index.is_file():
        return FileResponse(index)
    return _not_found()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
