"""Sample catalog shown while the store holds no products."""

from datetime import UTC, datetime

from storefront.catalogue.product import Product

SAMPLE_PRODUCTS = [
    {
        "name": "Organic Rice",
        "description": "Premium quality organic rice, 5kg pack",
        "price": 450,
        "image": "https://images.unsplash.com/photo-1586201375761-83865001e31c?w=400",
        "category": "Rice & Grains",
        "stock": 50,
    },
    {
        "name": "Pure Honey",
        "description": "100% pure natural honey, 500g",
        "price": 350,
        "image": "https://images.unsplash.com/photo-1587049352846-4a222e784d38?w=400",
        "category": "Honey & Sweeteners",
        "stock": 30,
    },
    {
        "name": "Fresh Milk",
        "description": "Farm fresh milk, 1 liter",
        "price": 80,
        "image": "https://images.unsplash.com/photo-1563636619-e9143da7973b?w=400",
        "category": "Dairy",
        "stock": 100,
    },
    {
        "name": "Organic Eggs",
        "description": "Farm fresh organic eggs, dozen",
        "price": 150,
        "image": "https://images.unsplash.com/photo-1582722872445-44dc5f7e3c8f?w=400",
        "category": "Dairy",
        "stock": 40,
    },
    {
        "name": "Mustard Oil",
        "description": "Pure mustard oil, 1 liter",
        "price": 220,
        "image": "https://images.unsplash.com/photo-1474979266404-7eaacbcd87c5?w=400",
        "category": "Cooking Oil",
        "stock": 25,
    },
    {
        "name": "Mixed Spices",
        "description": "Assorted spices pack, 500g",
        "price": 280,
        "image": "https://images.unsplash.com/photo-1596040033229-a9821ebd058d?w=400",
        "category": "Spices",
        "stock": 35,
    },
]


def sample_products() -> list[Product]:
    """Build the sample catalog with stable ``sample-<n>`` ids."""
    now = datetime.now(UTC)
    return [Product(id=f"sample-{index}", created_at=now, **data) for index, data in enumerate(SAMPLE_PRODUCTS)]
