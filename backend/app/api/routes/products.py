from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.exceptions import StoreError, ValidationError
from app.schemas.product import ProductFields, ProductResponse, ProductUpdated
from app.services.product_service import product_service

router = APIRouter(prefix="/products", tags=["products"])

MISSING_FIELDS_MESSAGE = "All fields are required."


def _require_fields(payload: Optional[ProductFields]) -> dict:
    payload = payload or ProductFields()
    if not payload.is_complete():
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    return payload.model_dump()


@router.get("", response_model=List[ProductResponse])
def list_products(db: Session = Depends(get_db)):
    """List all products"""
    try:
        return product_service.list_products(db)
    except StoreError as exc:
        raise exc.with_message("Error fetching products") from exc


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(payload: Optional[ProductFields] = None, db: Session = Depends(get_db)):
    """Add a new product"""
    fields = _require_fields(payload)
    try:
        return product_service.create_product(db, fields)
    except StoreError as exc:
        raise exc.with_message("Error adding product") from exc


@router.put("/{product_id}", response_model=ProductUpdated)
def update_product(
    product_id: int,
    payload: Optional[ProductFields] = None,
    db: Session = Depends(get_db)
):
    """Replace every field of a product"""
    fields = _require_fields(payload)
    try:
        product_service.update_product(db, product_id, fields)
    except StoreError as exc:
        raise exc.with_message("Error updating product.") from exc

    return {"id": product_id, **fields, "message": "Product updated successfully."}


@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """Delete a product"""
    try:
        product_service.delete_product(db, product_id)
    except StoreError as exc:
        raise exc.with_message("Error deleting product.") from exc

    return {"message": "Product deleted successfully."}
