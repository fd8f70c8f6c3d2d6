# inventory_api/routers/brands.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.models.brands import Brand
from inventory_api.schemas.brand import BrandCreate, BrandUpdate, BrandResponse

router = APIRouter(
    prefix="/brands",
    tags=["Brands"],
)


def _get_brand_or_404(db: Session, brand_id: int) -> Brand:
    brand = db.query(Brand).filter(Brand.id == brand_id).first()

    if not brand:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Brand not found",
        )

    return brand


def _ensure_name_available(db: Session, name: str, brand_id: int | None = None):
    query = db.query(Brand.id).filter(Brand.name == name)
    if brand_id is not None:
        query = query.filter(Brand.id != brand_id)

    if query.first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Brand name already exists",
        )


@router.get("", response_model=list[BrandResponse])
def list_brands(db: Session = Depends(get_db)):
    return db.query(Brand).order_by(Brand.name.asc()).all()


@router.get("/{brand_id}", response_model=BrandResponse)
def get_brand(brand_id: int, db: Session = Depends(get_db)):
    return _get_brand_or_404(db, brand_id)


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
def create_brand(brand_data: BrandCreate, db: Session = Depends(get_db)):
    name = brand_data.name.strip()
    _ensure_name_available(db, name)

    brand = Brand(**brand_data.model_dump(exclude={"name"}), name=name)

    db.add(brand)
    db.commit()
    db.refresh(brand)

    return brand


@router.put("/{brand_id}", response_model=BrandResponse)
def update_brand(
    brand_id: int,
    brand_data: BrandUpdate,
    db: Session = Depends(get_db),
):
    brand = _get_brand_or_404(db, brand_id)

    name = brand_data.name.strip()
    _ensure_name_available(db, name, brand_id=brand.id)

    for field, value in brand_data.model_dump(exclude={"name"}).items():
        setattr(brand, field, value)
    brand.name = name

    db.commit()
    db.refresh(brand)

    return brand


@router.delete("/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_brand(brand_id: int, db: Session = Depends(get_db)):
    brand = _get_brand_or_404(db, brand_id)

    db.delete(brand)
    db.commit()

    return None
