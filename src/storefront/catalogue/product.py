"""Product aggregate and the patch used to edit it."""

import json
from dataclasses import dataclass, fields
from datetime import UTC, datetime
from typing import Any

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from storefront.catalogue.events import ProductAdded, ProductUpdated
from storefront.domain import storefront

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET: Any = object()


@storefront.aggregate
class Product:
    """A product in the catalog.

    ``stock`` is the upper bound for the quantity of this product a cart
    may hold.
    """

    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    image = String(max_length=1000)
    category = String(max_length=100)
    stock = Integer(default=0, min_value=0)
    created_at = DateTime()

    @classmethod
    def create(cls, name, price, description=None, image=None, category=None, stock=0):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            image=image,
            category=category,
            stock=stock,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                category=product.category,
                price=product.price,
                stock=product.stock,
                created_at=now,
            )
        )
        return product

    def apply_patch(self, patch: "ProductPatch") -> list[str]:
        """Apply the fields set on ``patch`` one by one and return their names.

        Each assignment goes through the field's own validation, so a
        negative price or a non-integer stock is rejected here.
        """
        changes = patch.changes()
        for field_name, value in changes.items():
            setattr(self, field_name, value)

        if changes:
            self.raise_(
                ProductUpdated(
                    product_id=self.id,
                    changed_fields=json.dumps(sorted(changes)),
                )
            )
        return sorted(changes)

    def to_document(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description or "",
            "price": self.price,
            "image": self.image or "",
            "category": self.category or "",
            "stock": self.stock,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_document(cls, document: dict) -> "Product":
        created_at = document.get("createdAt")
        return cls(
            id=document["id"],
            name=document["name"],
            description=document.get("description"),
            price=document["price"],
            image=document.get("image"),
            category=document.get("category"),
            stock=document.get("stock", 0),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )


@dataclass(frozen=True)
class ProductPatch:
    """Partial update of a product: only the fields that are set change."""

    name: Any = _UNSET
    description: Any = _UNSET
    price: Any = _UNSET
    image: Any = _UNSET
    category: Any = _UNSET
    stock: Any = _UNSET

    @classmethod
    def from_mapping(cls, data: dict) -> "ProductPatch":
        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise ValidationError({field_name: ["Field cannot be updated"] for field_name in unknown})
        return cls(**data)

    def changes(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not _UNSET}
