"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalog."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    category = String(max_length=100)
    price = Float(required=True)
    stock = Integer(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """Some of the product's editable fields changed."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    changed_fields = Text(required=True)  # JSON list of field names
