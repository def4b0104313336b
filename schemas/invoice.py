from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from typing import Annotated, List, Optional

# Largest value a SQLite/most SQL INTEGER primary key can hold
DB_ID_MAX = 2**63 - 1

# Currency: exact Decimal in Python, a plain number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

DbId = Annotated[int, Field(ge=1, le=DB_ID_MAX)]


class ProductIn(BaseModel):
    """Nested product inside an invoice payload; invoice_id is assigned on insert."""
    name: Optional[str] = None
    price: Money = Decimal("0")


class InvoiceIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    image_url: Optional[str] = None
    amount: Money = Decimal("0")

    products: List[ProductIn] = []


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    price: Money
    invoice_id: int


class InvoiceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: Optional[str] = None
    image_url: Optional[str] = None
    amount: Money

    products: List[ProductOut] = []
