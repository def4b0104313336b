import re
from decimal import Decimal
from typing import Annotated, Union

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from core.errors import NotFoundError, RequestValidationFailed
from core.logger import log
from core.versioning import ApiVersion, ApiVersionSet, route_table
from db.session import get_db
from models.invoice import Product
from queries.invoices import (
    create_invoice,
    delete_invoice,
    get_invoice_by_id,
    invoice_exists,
    list_invoice_products,
    list_invoices,
    list_invoices_above_amount,
)
from schemas.invoice import DB_ID_MAX, InvoiceIn, InvoiceOut, ProductOut
from schemas.responses import ApiResponse
from services.validators import validate_invoice

PREFIX = "/api/invoice"
PRODUCTS_PATH = "/{invoice_id}/products"

# name segment constraints for /{invoice_id}/products/{name}
NAME_SEGMENT_MIN = 5
NAME_SEGMENT_MAX = 10

# ASCII digits only; int() would also take "0_1" or non-ASCII digits
_POSITION_RE = re.compile(r"-?[0-9]{1,18}")

InvoiceId = Annotated[int, Path(ge=1, le=DB_ID_MAX)]

invoice_versions = ApiVersionSet("1.0", "2.0")

router = APIRouter(prefix=PREFIX, tags=["invoice"], dependencies=[Depends(invoice_versions)])


def _load_invoice_products(db: Session, invoice_id: int) -> list[Product]:
    if not invoice_exists(db, invoice_id):
        raise NotFoundError(f"Invoice {invoice_id} not found")
    return list_invoice_products(db, invoice_id)


def _product_at(products: list[Product], product_id: int = 1) -> ProductOut:
    """1-based position inside the invoice's products."""
    index = product_id - 1
    if index < 0 or index >= len(products):
        raise NotFoundError(f"Product {product_id} not found")
    return ProductOut.model_validate(products[index])


@route_table.route("GET", PREFIX + PRODUCTS_PATH, "1.0")
def _all_products(products: list[Product]) -> list[ProductOut]:
    return [ProductOut.model_validate(p) for p in products]


@route_table.route("GET", PREFIX + PRODUCTS_PATH, "2.0")
def _first_product(products: list[Product]) -> ProductOut:
    return _product_at(products, 1)


@router.post("", response_model=ApiResponse[InvoiceOut], status_code=201)
def add_new_invoice(payload: InvoiceIn, db: Session = Depends(get_db)):
    result = validate_invoice(payload)
    if not result.ok:
        raise RequestValidationFailed("Invoice payload is invalid", result.errors)

    inv = create_invoice(db, payload)
    log.info("Created invoice id=%s with %d products", inv.id, len(inv.products))
    return ApiResponse(data=InvoiceOut.model_validate(inv))


@router.get("", response_model=ApiResponse[list[InvoiceOut]])
def get_invoices(db: Session = Depends(get_db)):
    """
    All invoices with their products.
    An empty store is reported as 404.
    """
    rows = list_invoices(db)
    if not rows:
        raise NotFoundError("No invoices found")
    return ApiResponse(data=[InvoiceOut.model_validate(inv) for inv in rows])


# declared before /{invoice_id} so "amount" is never parsed as an id
@router.get("/amount", response_model=ApiResponse[list[InvoiceOut]])
def get_high_value(
    value: Decimal = Query(Decimal("0"), alias="_value"),
    db: Session = Depends(get_db),
):
    rows = list_invoices_above_amount(db, value)
    return ApiResponse(data=[InvoiceOut.model_validate(inv) for inv in rows])


@router.get(PRODUCTS_PATH, response_model=ApiResponse[Union[list[ProductOut], ProductOut]])
def get_invoice_products(
    invoice_id: InvoiceId,
    version: ApiVersion = Depends(invoice_versions),
    db: Session = Depends(get_db),
):
    """
    v1.0: every product of the invoice.
    v2.0: only the first one.
    """
    handler = route_table.resolve("GET", PREFIX + PRODUCTS_PATH, version)
    products = _load_invoice_products(db, invoice_id)
    return ApiResponse(data=handler(products))


@router.get(
    PRODUCTS_PATH + "/{product_key}",
    response_model=ApiResponse[Union[ProductOut, list[ProductOut]]],
)
def get_invoice_product(invoice_id: InvoiceId, product_key: str, db: Session = Depends(get_db)):
    """
    Integer key: the product at that 1-based position.
    5-10 character key: products of the invoice with that name (case-insensitive).
    """
    position = int(product_key) if _POSITION_RE.fullmatch(product_key) else None

    if position is None and not (NAME_SEGMENT_MIN <= len(product_key) <= NAME_SEGMENT_MAX):
        raise NotFoundError(f"No route for product key {product_key!r}")

    products = _load_invoice_products(db, invoice_id)

    if position is not None:
        return ApiResponse(data=_product_at(products, position))

    wanted = product_key.lower()
    matches = [p for p in products if (p.name or "").lower() == wanted]
    return ApiResponse(data=[ProductOut.model_validate(p) for p in matches])


@router.get("/{invoice_id}", response_model=ApiResponse[InvoiceOut])
def get_invoice(invoice_id: InvoiceId, db: Session = Depends(get_db)):
    inv = get_invoice_by_id(db, invoice_id)
    if inv is None:
        raise NotFoundError(f"Invoice {invoice_id} not found")
    return ApiResponse(data=InvoiceOut.model_validate(inv))


@router.delete("/{invoice_id}", response_model=ApiResponse[InvoiceOut])
def remove_invoice(invoice_id: InvoiceId, db: Session = Depends(get_db)):
    deleted = delete_invoice(db, invoice_id)
    if deleted is None:
        raise NotFoundError(f"Invoice {invoice_id} not found")
    return ApiResponse(data=deleted)
