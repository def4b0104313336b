import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from schemas.invoice import InvoiceIn, ProductIn
from schemas.product import ProductCreate
from schemas.responses import FieldError

ORDER_STATUSES = ("created", "paid", "delivered", "completed")

INVOICE_NAME_MAX = 50
PRODUCT_NAME_MAX = 10
MONEY_PLACES = 2

_SLUG_RE = re.compile(r"^[a-z0-9-]+$")


@dataclass
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field=field_name, message=message))

    def extend(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)


def is_valid_order_status(value: Any) -> bool:
    """
    True when the value mentions one of the known statuses
    (case-insensitive substring match, e.g. "Order PAID" is valid).
    """
    if value is None:
        return False
    text = str(value).lower()
    return any(status in text for status in ORDER_STATUSES)


def is_valid_slug(value: Any) -> bool:
    """Lowercase letters, digits and dashes only."""
    if value is None:
        return False
    return bool(_SLUG_RE.fullmatch(str(value)))


def _check_product_name(result: ValidationResult, name: str | None, field_name: str) -> None:
    if name is not None and len(name) > PRODUCT_NAME_MAX:
        result.add(field_name, f"must be at most {PRODUCT_NAME_MAX} characters")


def _check_money(result: ValidationResult, value: Decimal, field_name: str) -> None:
    if value.as_tuple().exponent < -MONEY_PLACES:
        result.add(field_name, f"must have at most {MONEY_PLACES} decimal places")


def validate_product(payload: ProductCreate | ProductIn, prefix: str = "") -> ValidationResult:
    result = ValidationResult()
    _check_product_name(result, payload.name, f"{prefix}name")
    _check_money(result, payload.price, f"{prefix}price")
    return result


def validate_invoice(payload: InvoiceIn) -> ValidationResult:
    result = ValidationResult()

    # stored exactly as sent; whitespace-only counts as missing
    if not (payload.name or "").strip():
        result.add("name", "is required")
    elif len(payload.name) > INVOICE_NAME_MAX:
        result.add("name", f"must be at most {INVOICE_NAME_MAX} characters")
    _check_money(result, payload.amount, "amount")

    for i, product in enumerate(payload.products or []):
        result.extend(validate_product(product, prefix=f"products[{i}]."))

    return result
