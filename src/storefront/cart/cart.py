"""Cart aggregate: the customer's single active cart.

Lines are keyed by product id and hold a snapshot of the product taken when
it was first added. ``total`` and ``item_count`` are derived from the lines
on every read and never stored.
"""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from storefront.domain import storefront

ACTIVE_CART_ID = "active"


@storefront.value_object(part_of="Cart")
class ProductSnapshot:
    """Copy of a product's fields, detached from the catalog."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    image = String(max_length=1000)
    category = String(max_length=100)
    stock = Integer(default=0, min_value=0)
    created_at = DateTime()

    @classmethod
    def of(cls, product):
        return cls(
            product_id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            image=product.image,
            category=product.category,
            stock=product.stock,
            created_at=product.created_at,
        )

    def to_document(self) -> dict:
        return {
            "id": str(self.product_id),
            "name": self.name,
            "description": self.description or "",
            "price": self.price,
            "image": self.image or "",
            "category": self.category or "",
            "stock": self.stock,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_document(cls, document: dict):
        created_at = document.get("createdAt")
        return cls(
            product_id=document["id"],
            name=document["name"],
            description=document.get("description"),
            price=document["price"],
            image=document.get("image"),
            category=document.get("category"),
            stock=document.get("stock", 0),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )


@storefront.entity(part_of="Cart")
class CartLine:
    product = ValueObject(ProductSnapshot, required=True)
    quantity = Integer(required=True, min_value=1)

    @property
    def subtotal(self) -> float:
        return self.product.price * self.quantity


@storefront.aggregate
class Cart:
    lines = HasMany(CartLine)

    @classmethod
    def empty(cls):
        return cls(id=ACTIVE_CART_ID)

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def total(self) -> float:
        return sum(line.subtotal for line in self.lines)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def line_for(self, product_id):
        return next((line for line in self.lines if str(line.product.product_id) == str(product_id)), None)

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add(self, product, quantity=1):
        """Put ``quantity`` units of ``product`` in the cart.

        An existing line for the same product grows by ``quantity``. Stock is
        not checked here; callers check it before adding.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be a positive whole number"]})

        existing = self.line_for(product.id)
        if existing:
            existing.quantity += quantity
            line_quantity = existing.quantity
        else:
            self.add_lines(CartLine(product=ProductSnapshot.of(product), quantity=quantity))
            line_quantity = quantity

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=str(product.id),
                quantity=quantity,
                line_quantity=line_quantity,
            )
        )

    def remove(self, product_id):
        line = self.line_for(product_id)
        if line is None:
            return

        self.remove_lines(line)
        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))

    def set_quantity(self, product_id, quantity):
        """Overwrite a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove(product_id)
            return

        line = self.line_for(product_id)
        if line is None:
            return

        previous_quantity = line.quantity
        line.quantity = quantity
        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def clear(self):
        removed = len(self.lines)
        for line in list(self.lines):
            self.remove_lines(line)
        self.raise_(CartCleared(cart_id=str(self.id), items_removed=removed))

    # -------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------
    def to_document(self) -> list[dict]:
        return [{"product": line.product.to_document(), "quantity": line.quantity} for line in self.lines]
