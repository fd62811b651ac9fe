import logging
from typing import Any, Dict, List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError, StoreError
from app.models.product import Product

logger = logging.getLogger(__name__)


class ProductService:
    """Product CRUD. Update and delete report NotFoundError when no row was affected."""

    @staticmethod
    def list_products(db: Session) -> List[Product]:
        try:
            return db.query(Product).all()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error fetching products: {str(e)}")
            raise StoreError() from e

    @staticmethod
    def create_product(db: Session, fields: Dict[str, Any]) -> Product:
        db_product = Product(**fields)
        try:
            db.add(db_product)
            db.commit()
            db.refresh(db_product)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error adding product: {str(e)}")
            raise StoreError() from e
        return db_product

    @staticmethod
    def update_product(db: Session, product_id: int, fields: Dict[str, Any]) -> None:
        try:
            updated = (
                db.query(Product)
                .filter(Product.id == product_id)
                .update(fields, synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating product {product_id}: {str(e)}")
            raise StoreError() from e

        if updated == 0:
            raise NotFoundError("Product not found.")

    @staticmethod
    def delete_product(db: Session, product_id: int) -> None:
        try:
            deleted = db.query(Product).filter(Product.id == product_id).delete(synchronize_session=False)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting product {product_id}: {str(e)}")
            raise StoreError() from e

        if deleted == 0:
            raise NotFoundError("Product not found.")


product_service = ProductService()
