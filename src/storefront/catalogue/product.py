"""Product catalogue: an externally owned, immutable list of products.

The core only reads it: carts snapshot a product's name and price at the
moment it is added, so later catalogue changes never reach existing lines.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class Product(BaseModel):
    id: int
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0)

    model_config = {"frozen": True}


DEFAULT_PRODUCTS = (
    Product(id=1, name="Laptop", price=Decimal("999.99")),
    Product(id=2, name="Mouse", price=Decimal("29.99")),
    Product(id=3, name="Keyboard", price=Decimal("79.99")),
    Product(id=4, name="Monitor", price=Decimal("299.99")),
    Product(id=5, name="Headphones", price=Decimal("149.99")),
)


class ProductCatalog:
    """Read-only lookup over a fixed set of products."""

    def __init__(self, products):
        self._products = tuple(products)
        self._by_id = {product.id: product for product in self._products}
        if len(self._by_id) != len(self._products):
            raise ValueError("Product ids must be unique")

    @classmethod
    def default(cls) -> "ProductCatalog":
        return cls(DEFAULT_PRODUCTS)

    def get(self, product_id) -> Product | None:
        return self._by_id.get(product_id)

    def all(self) -> tuple[Product, ...]:
        return self._products

    def __len__(self):
        return len(self._products)

    def __contains__(self, product_id):
        return product_id in self._by_id
