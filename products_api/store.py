# products_api/store.py

"""
Record store for products: the only place that talks to the ORM session.
"""
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .models import Product
from .schemas import ProductCreate, ProductUpdate


class ProductStore:
    """
    CRUD operations over the products table, bound to one request's session.

    ``find_by_id`` returns None for an unknown id; callers check for it before
    calling any of the mutating methods. Database errors roll the session back
    and are re-raised unchanged.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def find_all(self) -> List[Product]:
        """All products, newest id first."""
        return self.db.query(Product).order_by(Product.id.desc()).all()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def create(self, payload: ProductCreate) -> Product:
        product = Product(**payload.model_dump())
        with self._transaction():
            self.db.add(product)
        self.db.refresh(product)
        return product

    def update(self, product: Product, payload: ProductUpdate) -> Product:
        # Overwrite every writable field; the id never changes
        for field, value in payload.model_dump().items():
            setattr(product, field, value)
        return self.save(product)

    def toggle_availability(self, product: Product) -> Product:
        product.availability = not product.availability
        return self.save(product)

    def save(self, product: Product) -> Product:
        with self._transaction():
            self.db.add(product)
        self.db.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        with self._transaction():
            self.db.delete(product)
