"""Tests for the Product aggregate root."""

import json

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields
from storefront.catalogue.events import ProductAdded, ProductUpdated
from storefront.catalogue.product import Product, ProductPatch


class TestProductConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Product.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Product)
        for name in ("name", "description", "price", "image", "category", "stock", "created_at"):
            assert name in fields

    def test_create_product(self):
        product = Product.create(name="Organic Rice", price=450, category="Rice & Grains", stock=50)
        assert product.id is not None
        assert product.name == "Organic Rice"
        assert product.price == 450.0
        assert product.stock == 50
        assert product.created_at is not None

    def test_create_raises_product_added(self):
        product = Product.create(name="Pure Honey", price=350, stock=30)
        events = [e for e in product._events if isinstance(e, ProductAdded)]
        assert len(events) == 1
        assert events[0].name == "Pure Honey"
        assert events[0].stock == 30

    def test_stock_defaults_to_zero(self):
        assert Product.create(name="Mustard Oil", price=220).stock == 0

    def test_name_is_required(self):
        with pytest.raises(ValidationError) as exc:
            Product.create(name=None, price=10)
        assert "name" in exc.value.messages

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Product.create(name="Milk", price=-1)
        assert "price" in exc.value.messages

    def test_negative_stock_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Product.create(name="Milk", price=80, stock=-5)
        assert "stock" in exc.value.messages


class TestProductDocuments:
    def test_to_document_uses_stored_shape(self):
        product = Product.create(name="Fresh Milk", price=80, description="1 liter", stock=100)
        document = product.to_document()
        assert document["id"] == str(product.id)
        assert document["description"] == "1 liter"
        assert document["image"] == ""
        assert "createdAt" in document

    def test_round_trip_keeps_fields(self):
        product = Product.create(name="Organic Eggs", price=150, category="Dairy", stock=40)
        restored = Product.from_document(product.to_document())
        assert str(restored.id) == str(product.id)
        assert restored.category == "Dairy"
        assert restored.created_at == product.created_at


class TestProductPatch:
    def test_only_set_fields_change(self):
        product = Product.create(name="Mixed Spices", price=280, stock=35, description="500g")

        changed = product.apply_patch(ProductPatch(price=300))

        assert changed == ["price"]
        assert product.price == 300.0
        assert product.name == "Mixed Spices"
        assert product.description == "500g"

    def test_explicit_none_clears_a_field(self):
        product = Product.create(name="Mixed Spices", price=280, description="500g")
        product.apply_patch(ProductPatch(description=None))
        assert product.description is None

    def test_patch_raises_product_updated(self):
        product = Product.create(name="Mixed Spices", price=280)
        product.apply_patch(ProductPatch(stock=5, name="Spice Mix"))
        event = next(e for e in product._events if isinstance(e, ProductUpdated))
        assert json.loads(event.changed_fields) == ["name", "stock"]

    def test_empty_patch_raises_nothing(self):
        product = Product.create(name="Mixed Spices", price=280)
        assert product.apply_patch(ProductPatch()) == []
        assert not any(isinstance(e, ProductUpdated) for e in product._events)

    def test_invalid_value_is_rejected(self):
        product = Product.create(name="Mixed Spices", price=280)
        with pytest.raises(ValidationError):
            product.apply_patch(ProductPatch(price=-10))

    def test_from_mapping(self):
        patch = ProductPatch.from_mapping({"stock": 12, "category": "Spices"})
        assert patch.changes() == {"stock": 12, "category": "Spices"}

    def test_from_mapping_rejects_unknown_fields(self):
        with pytest.raises(ValidationError) as exc:
            ProductPatch.from_mapping({"id": "p1", "price": 10})
        assert "id" in exc.value.messages
