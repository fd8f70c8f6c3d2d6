# inventory_api/routers/sellers.py

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.core.filters import search_filter
from inventory_api.models.sales import Sale
from inventory_api.models.sellers import Seller
from inventory_api.schemas.seller import SellerCreate, SellerUpdate, SellerResponse

router = APIRouter(
    prefix="/sellers",
    tags=["Sellers"],
)


def _get_seller_or_404(db: Session, seller_id: int) -> Seller:
    seller = db.query(Seller).filter(Seller.id == seller_id).first()

    if not seller:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Seller not found",
        )

    return seller


@router.get("", response_model=list[SellerResponse])
def list_sellers(
    db: Session = Depends(get_db),
    search: str | None = Query(None),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    query = db.query(Seller)

    clause = search_filter(search, Seller.name, Seller.email)
    if clause is not None:
        query = query.filter(clause)

    return (
        query
        .order_by(Seller.created_at.desc(), Seller.id.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )


@router.get("/{seller_id}", response_model=SellerResponse)
def get_seller(seller_id: int, db: Session = Depends(get_db)):
    return _get_seller_or_404(db, seller_id)


@router.post("", response_model=SellerResponse, status_code=status.HTTP_201_CREATED)
def create_seller(seller_data: SellerCreate, db: Session = Depends(get_db)):
    seller = Seller(**seller_data.model_dump())

    db.add(seller)
    db.commit()
    db.refresh(seller)

    return seller


@router.put("/{seller_id}", response_model=SellerResponse)
def update_seller(
    seller_id: int,
    seller_data: SellerUpdate,
    db: Session = Depends(get_db),
):
    seller = _get_seller_or_404(db, seller_id)

    for field, value in seller_data.model_dump().items():
        setattr(seller, field, value)

    db.commit()
    db.refresh(seller)

    return seller


@router.delete("/{seller_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_seller(seller_id: int, db: Session = Depends(get_db)):
    seller = _get_seller_or_404(db, seller_id)

    # Sales keep the seller's name; only the reference is cleared
    db.query(Sale).filter(Sale.seller_id == seller.id).update(
        {Sale.seller_id: None}, synchronize_session=False
    )

    db.delete(seller)
    db.commit()

    return None
