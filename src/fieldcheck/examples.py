"""Sample record used by the ``demo`` command and the tests."""

from dataclasses import dataclass, field


@dataclass
class Product:
    product_id: int = field(metadata={"json": "productId", "validate": "required,positiveNumberField"})
    product_name: str = field(metadata={"json": "productName", "validate": "nameField"})
    quantity: int = field(metadata={"json": "quantity", "validate": "positiveNumberField"})
    is_active: bool = field(metadata={"json": "isActive", "validate": "alwaysTrueField"})
    slug: str = field(metadata={"json": "slug", "validate": "slugField"})


def sample_product(**overrides) -> Product:
    values = {
        "product_id": 1,
        "product_name": "Test Product",
        "quantity": 5,
        "is_active": True,
        "slug": "test-slug",
    }
    values.update(overrides)
    return Product(**values)
