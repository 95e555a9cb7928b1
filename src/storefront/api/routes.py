"""FastAPI endpoints for the storefront.

Serves the contract the remote backend speaks: documents carry ``_id``
instead of ``id``. Product reads, order placement and order lookup by id are
public; everything else needs an admin bearer token.
"""

from fastapi import APIRouter, Body, Depends, Request
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.api.auth import create_token, require_admin
from storefront.api.schemas import (
    CreateOrderRequest,
    CreateProductRequest,
    DeletedResponse,
    LoginRequest,
    OrderStatsResponse,
    TokenResponse,
    UpdateOrderStatusRequest,
)
from storefront.catalogue.product import ProductPatch
from storefront.exceptions import AuthFailure

auth_router = APIRouter(prefix="/auth", tags=["auth"])
product_router = APIRouter(prefix="/products", tags=["products"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


def remote_document(document: dict) -> dict:
    """Rename ``id`` to ``_id`` on a stored document."""
    mapped = dict(document)
    mapped["_id"] = mapped.pop("id")
    return mapped


def _backend(request: Request):
    return request.app.state.backend


# --- Auth endpoints ---


@auth_router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, request: Request) -> TokenResponse:
    if not body.username.strip() or not body.password.strip():
        raise ValidationError({"credentials": ["Please enter both username and password"]})
    if not _backend(request).admins.verify(body.username, body.password):
        raise AuthFailure("Invalid credentials")
    return TokenResponse(token=create_token(body.username, request.app.state.settings.jwt_secret))


# --- Product endpoints ---


@product_router.get("")
async def list_products(request: Request) -> list[dict]:
    return [remote_document(p.to_document()) for p in _backend(request).list_products()]


@product_router.get("/{product_id}")
async def get_product(product_id: str, request: Request) -> dict:
    return remote_document(_backend(request).get_product(product_id).to_document())


@product_router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_product(body: CreateProductRequest, request: Request) -> dict:
    product = _backend(request).create_product(
        name=body.name,
        price=body.price,
        description=body.description,
        image=body.image,
        category=body.category,
        stock=body.stock,
    )
    return remote_document(product.to_document())


@product_router.put("/{product_id}", dependencies=[Depends(require_admin)])
async def update_product(product_id: str, request: Request, body: dict = Body(...)) -> dict:
    product = _backend(request).update_product(product_id, ProductPatch.from_mapping(body))
    if product is None:
        raise ObjectNotFoundError({"_entity": f"Product {product_id} does not exist"})
    return remote_document(product.to_document())


@product_router.delete("/{product_id}", response_model=DeletedResponse, dependencies=[Depends(require_admin)])
async def delete_product(product_id: str, request: Request) -> DeletedResponse:
    if not _backend(request).delete_product(product_id):
        raise ObjectNotFoundError({"_entity": f"Product {product_id} does not exist"})
    return DeletedResponse(message="Product deleted")


# --- Order endpoints ---


@order_router.get("", dependencies=[Depends(require_admin)])
async def list_orders(request: Request) -> list[dict]:
    return [remote_document(o.to_document()) for o in _backend(request).list_orders()]


@order_router.post("", status_code=201)
async def create_order(body: CreateOrderRequest, request: Request) -> dict:
    order = _backend(request).create_order(
        customer_name=body.customer_name,
        phone=body.phone,
        address=body.address,
        items=[item.model_dump() for item in body.items],
        total_amount=body.total_amount,
        notes=body.notes,
    )
    return remote_document(order.to_document())


@order_router.get("/stats", response_model=OrderStatsResponse, dependencies=[Depends(require_admin)])
async def order_stats(request: Request) -> OrderStatsResponse:
    stats = _backend(request).get_order_stats()
    return OrderStatsResponse(
        total_orders=stats.total_orders,
        total_sales=stats.total_sales,
        pending_orders=stats.pending_orders,
        completed_orders=stats.completed_orders,
        recent_orders=[remote_document(o.to_document()) for o in stats.recent_orders],
    )


@order_router.get("/{order_id}")
async def get_order(order_id: str, request: Request) -> dict:
    return remote_document(_backend(request).get_order(order_id).to_document())


@order_router.put("/{order_id}", dependencies=[Depends(require_admin)])
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest, request: Request) -> dict:
    order = _backend(request).update_order_status(order_id, body.status)
    if order is None:
        raise ObjectNotFoundError({"_entity": f"Order {order_id} does not exist"})
    return remote_document(order.to_document())


@order_router.delete("/{order_id}", response_model=DeletedResponse, dependencies=[Depends(require_admin)])
async def delete_order(order_id: str, request: Request) -> DeletedResponse:
    if not _backend(request).delete_order(order_id):
        raise ObjectNotFoundError({"_entity": f"Order {order_id} does not exist"})
    return DeletedResponse(message="Order deleted")
