# products_api/models.py

"""
SQLAlchemy database models for the Products API.
"""

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from .db import Base


class Product(Base):
    """
    SQLAlchemy model for the 'products' table.
    Represents a product with its price and availability flag.
    """

    __tablename__ = "products"

    # Primary Key: assigned by the database on insert, never changed afterwards.
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    name = Column(String(100), nullable=False)

    # Stored unrounded so any accepted price stays greater than 0.
    price = Column(Float, nullable=False)

    # Defaults to available on creation.
    availability = Column(Boolean, nullable=False, default=True)

    # 'created_at' defaults to current timestamp on creation.
    # 'updated_at' is refreshed on every update.
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self):
        return (
            f"<Product(id={self.id}, name='{self.name}', "
            f"availability={self.availability})>"
        )
