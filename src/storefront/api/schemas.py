"""Pydantic request/response schemas for the storefront API.

Request bodies use the camelCase names of the stored documents. Text fields
default to empty strings so that missing customer details reach the domain
and come back with its own messages.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# --- Auth ---


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    token: str


# --- Products ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Organic Rice",
                    "description": "Premium quality organic rice",
                    "price": 450,
                    "image": "https://images.unsplash.com/photo-1586201375761-83865001e31c",
                    "category": "Grains",
                    "stock": 50,
                }
            ]
        }
    }

    name: str = ""
    description: str | None = None
    price: float
    image: str | None = None
    category: str | None = Field(None, max_length=100)
    stock: int = 0


# --- Orders ---


class OrderItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId")
    product_name: str = Field(..., alias="productName")
    price: float
    quantity: int


class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "customerName": "Asha Rahman",
                    "phone": "01700000000",
                    "address": "House 12, Road 5, Dhanmondi, Dhaka",
                    "items": [{"productId": "sample-0", "productName": "Organic Rice", "price": 450, "quantity": 2}],
                    "totalAmount": 900,
                    "notes": "Call before delivery",
                }
            ]
        },
    )

    customer_name: str = Field("", alias="customerName")
    phone: str = ""
    address: str = ""
    items: list[OrderItemRequest] = Field(default_factory=list)
    total_amount: float = Field(..., alias="totalAmount")
    notes: str | None = None


class UpdateOrderStatusRequest(BaseModel):
    status: str


class OrderStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_orders: int = Field(..., alias="totalOrders")
    total_sales: float = Field(..., alias="totalSales")
    pending_orders: int = Field(..., alias="pendingOrders")
    completed_orders: int = Field(..., alias="completedOrders")
    recent_orders: list[dict] = Field(default_factory=list, alias="recentOrders")


class DeletedResponse(BaseModel):
    message: str
