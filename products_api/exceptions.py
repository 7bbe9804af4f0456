# products_api/exceptions.py

"""
Exceptions raised inside the request pipeline and turned into JSON
responses by the handlers registered in ``products_api.main``.
"""
from typing import List

from .validation import ValidationFailure

PRODUCT_NOT_FOUND = "Producto no encontrado"


class InputValidationError(Exception):
    """One or more validation rules failed for the current request."""

    def __init__(self, failures: List[ValidationFailure]):
        super().__init__(f"{len(failures)} validation error(s)")
        self.failures = failures


class ProductNotFoundError(Exception):
    """The requested product id has no row in the store."""

    def __init__(self, product_id: int):
        super().__init__(PRODUCT_NOT_FOUND)
        self.product_id = product_id
