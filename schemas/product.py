from decimal import Decimal
from pydantic import BaseModel
from typing import Optional

from schemas.invoice import DbId, Money


class ProductCreate(BaseModel):
    """Standalone product; the caller must point it at an existing invoice."""
    name: Optional[str] = None
    price: Money = Decimal("0")
    invoice_id: DbId


class CatalogProduct(BaseModel):
    id: int
    name: str
    price: float
