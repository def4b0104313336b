from schemas.product import CatalogProduct

# Read-only demo catalog; handed out as an immutable tuple per request
DEMO_PRODUCTS: tuple[CatalogProduct, ...] = (
    CatalogProduct(id=1, name="Product A", price=1200.00),
    CatalogProduct(id=2, name="Product B", price=1300.00),
    CatalogProduct(id=3, name="Product C", price=1400.00),
)


def get_product_catalog() -> tuple[CatalogProduct, ...]:
    return DEMO_PRODUCTS
