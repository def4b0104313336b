from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import ConstraintViolationError
from core.logger import log
from models.invoice import Product
from schemas.product import ProductCreate


def create_product(db: Session, payload: ProductCreate) -> Product:
    try:
        product = Product(
            name=payload.name,
            price=payload.price,
            invoice_id=payload.invoice_id,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    except IntegrityError as e:
        db.rollback()
        log.warning("Product insert rejected (invoice_id=%s): %s", payload.invoice_id, e.orig)
        raise ConstraintViolationError(
            f"Invoice {payload.invoice_id} does not exist"
        ) from e
    except Exception:
        db.rollback()
        raise
