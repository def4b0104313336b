from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.errors import RequestValidationFailed
from core.logger import log
from core.versioning import ApiVersionSet
from db.session import get_db
from queries.products import create_product
from schemas.invoice import ProductOut
from schemas.product import ProductCreate
from schemas.responses import ApiResponse
from services.validators import validate_product

product_versions = ApiVersionSet("1.0")

router = APIRouter(prefix="/api/product", tags=["product"], dependencies=[Depends(product_versions)])


@router.post("", response_model=ApiResponse[ProductOut], status_code=201)
def add_product(payload: ProductCreate, db: Session = Depends(get_db)):
    """
    Standalone product insert. The invoice must already exist;
    the foreign key rejects anything else with a 400.
    """
    result = validate_product(payload)
    if not result.ok:
        raise RequestValidationFailed("Product payload is invalid", result.errors)

    product = create_product(db, payload)
    log.info("Created product id=%s for invoice id=%s", product.id, product.invoice_id)
    return ApiResponse(data=ProductOut.model_validate(product))
