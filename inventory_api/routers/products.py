# inventory_api/routers/products.py

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.core.config import settings
from inventory_api.core.filters import search_filter
from inventory_api.models.products import Product
from inventory_api.models.purchases import Purchase
from inventory_api.models.sales import Sale
from inventory_api.schemas.product import (
    LowStockResponse,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)
from inventory_api.services.factories import unique_product_code

router = APIRouter(
    prefix="/products",
    tags=["Products"],
)

SORTABLE_COLUMNS = {
    "name": Product.name,
    "price": Product.price,
    "stock": Product.stock,
    "sku": Product.sku,
    "created_at": Product.created_at,
    "updated_at": Product.updated_at,
}


def _get_product_or_404(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    return product


def _ensure_sku_available(db: Session, sku: str, product_id: int | None = None):
    query = db.query(Product.id).filter(Product.sku == sku)
    if product_id is not None:
        query = query.filter(Product.id != product_id)

    if query.first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="SKU already exists",
        )


def _commit_or_sku_conflict(db: Session):
    # A concurrent insert can take the SKU after the availability check
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="SKU already exists",
        )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
):
    _ensure_sku_available(db, product_data.sku)

    product = Product(
        **product_data.model_dump(),
        code=unique_product_code(db),
    )

    db.add(product)
    _commit_or_sku_conflict(db)
    db.refresh(product)

    return product


@router.get("", response_model=list[ProductResponse])
def list_products(
    db: Session = Depends(get_db),
    search: str | None = Query(None),
    category: str | None = Query(None),
    brand: str | None = Query(None),
    sort_by: Literal["name", "price", "stock", "sku", "created_at", "updated_at"] = "created_at",
    sort_order: Literal["asc", "desc"] = "desc",
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    query = db.query(Product).filter(Product.is_active.is_(True))

    clause = search_filter(search, Product.name, Product.description, Product.sku)
    if clause is not None:
        query = query.filter(clause)

    if category:
        query = query.filter(Product.category == category)

    if brand:
        query = query.filter(Product.brand == brand)

    column = SORTABLE_COLUMNS[sort_by]
    query = query.order_by(column.desc() if sort_order == "desc" else column.asc())

    return query.limit(limit).offset(offset).all()


@router.get("/low-stock", response_model=LowStockResponse)
def list_low_stock_products(
    db: Session = Depends(get_db),
    threshold: int = Query(settings.LOW_STOCK_THRESHOLD, ge=0),
):
    products = (
        db.query(Product)
        .filter(
            Product.stock <= threshold,
            Product.is_active.is_(True),
        )
        .order_by(Product.stock.asc())
        .all()
    )

    return {
        "threshold": threshold,
        "count": len(products),
        "products": products,
    }


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    return _get_product_or_404(db, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
):
    product = _get_product_or_404(db, product_id)

    changes = product_data.model_dump(exclude_unset=True)

    for field in ("name", "category", "brand", "price", "sku", "is_active"):
        if field in changes and changes[field] is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{field} cannot be null",
            )

    if "sku" in changes:
        _ensure_sku_available(db, changes["sku"], product_id=product.id)

    # Stock is not part of ProductUpdate; it moves only through the ledger
    for field, value in changes.items():
        setattr(product, field, value)

    _commit_or_sku_conflict(db)
    db.refresh(product)

    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    product = _get_product_or_404(db, product_id)

    # Deleting would orphan records whose effect is already in stock
    has_purchases = db.query(Purchase.id).filter(Purchase.product_id == product.id).first()
    has_sales = db.query(Sale.id).filter(Sale.product_id == product.id).first()

    if has_purchases or has_sales:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Product has purchase or sale records and cannot be deleted",
        )

    db.delete(product)
    db.commit()

    return None
