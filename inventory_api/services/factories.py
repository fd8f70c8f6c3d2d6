# inventory_api/services/factories.py

import secrets
import string
from decimal import Decimal

from sqlalchemy.orm import Session

from inventory_api.core.exceptions import ValidationError
from inventory_api.models.products import Product

CENTS = Decimal("0.01")

# Numeric(12, 2)
MAX_TOTAL = Decimal("9999999999.99")


def compute_total(quantity: int, price, total=None) -> Decimal:
    """Return the caller's total verbatim, or ``quantity * price``."""
    if total is not None:
        return Decimal(total)

    computed = (Decimal(quantity) * Decimal(price)).quantize(CENTS)
    if computed > MAX_TOTAL:
        raise ValidationError(f"total {computed} exceeds {MAX_TOTAL}", field="total")
    return computed


def generate_bill_no() -> str:
    # e.g. MV482913
    return f"MV{100000 + secrets.randbelow(900000)}"


def generate_product_code() -> str:
    # e.g. 48291-QKZD
    number_part = 10000 + secrets.randbelow(90000)
    letter_part = "".join(secrets.choice(string.ascii_uppercase) for _ in range(4))
    return f"{number_part}-{letter_part}"


def unique_product_code(db: Session, attempts: int = 10) -> str:
    for _ in range(attempts):
        code = generate_product_code()
        if not db.query(Product.id).filter(Product.code == code).first():
            return code

    raise RuntimeError("Unable to generate a unique product code")
