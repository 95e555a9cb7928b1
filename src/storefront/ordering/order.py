"""Order aggregate: a cash-on-delivery order and its status.

Status machine:
    pending, processing, completed, cancelled

Any status may move to any other status. There is no transition guard: an
admin can reopen a cancelled order or step a completed one back to
processing.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.ordering.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# User-facing messages for missing delivery details, keyed by field
_REQUIRED_DETAILS = {
    "customer_name": "Please enter your name",
    "phone": "Please enter your phone number",
    "address": "Please enter your delivery address",
}


@storefront.entity(part_of="Order")
class OrderItem:
    """A line of the order, copied from the cart at checkout.

    Name and price are the values at order time; later catalog edits do not
    reach them.
    """

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    def to_document(self) -> dict:
        return {
            "productId": str(self.product_id),
            "productName": self.product_name,
            "price": self.price,
            "quantity": self.quantity,
        }


@storefront.aggregate
class Order:
    customer_name = String(required=True, max_length=255)
    phone = String(required=True, max_length=30)
    address = Text(required=True)
    items = HasMany(OrderItem)
    total_amount = Float(required=True, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime()
    notes = Text()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_name, phone, address, items_data, total_amount, notes=None):
        """Create a pending order.

        Args:
            items_data: List of dicts with product_id, product_name, price,
                        quantity.
            total_amount: Order total as computed from the cart; stored as
                          given.
        """
        details = {"customer_name": customer_name, "phone": phone, "address": address}
        errors = {
            field: [message] for field, message in _REQUIRED_DETAILS.items() if not (details[field] or "").strip()
        }
        if errors:
            raise ValidationError(errors)

        now = datetime.now(UTC)
        order = cls(
            customer_name=customer_name.strip(),
            phone=phone.strip(),
            address=address.strip(),
            items=[OrderItem(**item) for item in items_data],
            total_amount=total_amount,
            status=OrderStatus.PENDING.value,
            created_at=now,
            notes=notes or None,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_name=order.customer_name,
                phone=order.phone,
                item_count=sum(item.quantity for item in order.items),
                total_amount=order.total_amount,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def change_status(self, new_status):
        try:
            target = OrderStatus(new_status.value if isinstance(new_status, OrderStatus) else new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {new_status}"]}) from None

        previous_status = self.status
        self.status = target.value
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous_status,
                new_status=target.value,
                changed_at=datetime.now(UTC),
            )
        )

    # -------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------
    def to_document(self) -> dict:
        document = {
            "id": str(self.id),
            "customerName": self.customer_name,
            "phone": self.phone,
            "address": self.address,
            "items": [item.to_document() for item in self.items],
            "totalAmount": self.total_amount,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
        if self.notes:
            document["notes"] = self.notes
        return document

    @classmethod
    def from_document(cls, document: dict):
        created_at = document.get("createdAt")
        return cls(
            id=document["id"],
            customer_name=document["customerName"],
            phone=document["phone"],
            address=document["address"],
            items=[
                OrderItem(
                    product_id=item["productId"],
                    product_name=item["productName"],
                    price=item["price"],
                    quantity=item["quantity"],
                )
                for item in document.get("items", [])
            ],
            total_amount=document["totalAmount"],
            status=document.get("status", OrderStatus.PENDING.value),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
            notes=document.get("notes"),
        )
