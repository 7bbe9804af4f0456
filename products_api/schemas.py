# products_api/schemas.py

"""
Pydantic schemas for the Products API.
The payload models carry input that already passed the route's validation
rules; the response models define the JSON envelopes the API returns.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Validated body of POST /api/products.
class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the product.")
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Price of the product. Must be greater than 0.")


# Validated body of PUT /api/products/{id}. Every field is overwritten.
class ProductUpdate(ProductCreate):
    availability: bool = Field(..., description="Whether the product can be sold.")


class ProductResponse(BaseModel):
    id: int = Field(..., description="The Product ID", examples=[1])
    name: str = Field(..., description="The Product name", examples=["Monitor curvo de 32 pulgadas"])
    price: float = Field(..., description="The product price", examples=[300])
    availability: bool = Field(..., description="The Product availability", examples=[True])
    created_at: Optional[datetime] = Field(None, description="Timestamp when the product was created.")
    updated_at: Optional[datetime] = Field(None, description="Timestamp when the product was last updated.")

    model_config = ConfigDict(from_attributes=True)


# -----------------------------
# Response envelopes
# -----------------------------


class ProductData(BaseModel):
    data: ProductResponse


class ProductListData(BaseModel):
    data: List[ProductResponse]


class MessageData(BaseModel):
    data: str = Field(..., examples=["Producto eliminado correctamente"])


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Producto no encontrado"])


class ValidationErrorItem(BaseModel):
    type: str = "field"
    value: Optional[Any] = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    errors: List[ValidationErrorItem]
