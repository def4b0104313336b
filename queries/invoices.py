from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from core.errors import ConstraintViolationError
from core.logger import log
from models.invoice import Invoice, Product
from schemas.invoice import InvoiceIn, InvoiceOut


def _with_products(db: Session):
    return db.query(Invoice).options(selectinload(Invoice.products))


def get_invoice_by_id(db: Session, invoice_id: int) -> Invoice | None:
    return _with_products(db).filter(Invoice.id == invoice_id).first()


def list_invoices(db: Session) -> list[Invoice]:
    return _with_products(db).order_by(Invoice.id).all()


def list_invoices_above_amount(db: Session, threshold: Decimal) -> list[Invoice]:
    # strictly greater: an invoice equal to the threshold is excluded
    return (
        _with_products(db)
        .filter(Invoice.amount > threshold)
        .order_by(Invoice.id)
        .all()
    )


def list_invoice_products(db: Session, invoice_id: int) -> list[Product]:
    return (
        db.query(Product)
        .join(Invoice, Product.invoice_id == Invoice.id)
        .filter(Invoice.id == invoice_id)
        .order_by(Product.id)
        .all()
    )


def invoice_exists(db: Session, invoice_id: int) -> bool:
    return db.query(Invoice.id).filter(Invoice.id == invoice_id).first() is not None


def create_invoice(db: Session, payload: InvoiceIn) -> Invoice:
    try:
        inv = Invoice(
            name=payload.name,
            email=payload.email,
            image_url=payload.image_url,
            amount=payload.amount,
        )
        for p in payload.products or []:
            inv.products.append(Product(name=p.name, price=p.price))

        db.add(inv)
        db.commit()
        db.refresh(inv)
        return inv

    except IntegrityError as e:
        db.rollback()
        log.warning("Invoice insert rejected by constraint: %s", e.orig)
        raise ConstraintViolationError("Invoice violates a database constraint") from e
    except Exception:
        db.rollback()
        raise


def delete_invoice(db: Session, invoice_id: int) -> InvoiceOut | None:
    """
    Load the tracked row (with products) before deleting it, so the ORM
    cascade removes its products as well. Returns a snapshot of what was deleted.
    """
    try:
        inv = get_invoice_by_id(db, invoice_id)
        if inv is None:
            return None

        snapshot = InvoiceOut.model_validate(inv)
        db.delete(inv)
        db.commit()
        log.info("Deleted invoice id=%s (%d products)", invoice_id, len(snapshot.products))
        return snapshot

    except Exception:
        db.rollback()
        raise
