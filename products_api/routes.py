# products_api/routes.py

"""
Product endpoints. Each route runs its validation rule chain first (through
``handle_input_errors``), then the handler, which only deals with input that
passed the rules.
"""
import logging

from fastapi import APIRouter, Depends, status

from .dependencies import get_store, handle_input_errors
from .exceptions import ProductNotFoundError
from .models import Product
from .schemas import (
    ErrorResponse,
    MessageData,
    ProductCreate,
    ProductData,
    ProductListData,
    ProductResponse,
    ProductUpdate,
    ValidationErrorResponse,
)
from .store import ProductStore
from .validation import (
    CREATE_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    UPDATE_PRODUCT_RULES,
    RequestInput,
    to_bool,
    to_number,
    to_string,
)

logger = logging.getLogger(__name__)

PRODUCT_DELETED = "Producto eliminado correctamente"

router = APIRouter()

# The id stays a plain string until its rule has accepted it, so it is
# documented here instead of through a typed path parameter.
ID_PARAMETER = {
    "parameters": [
        {
            "in": "path",
            "name": "id",
            "description": "The ID of the product",
            "required": True,
            "schema": {"type": "integer"},
        }
    ]
}

BAD_REQUEST = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ValidationErrorResponse,
        "description": "Bad Request - Invalid input data",
    }
}
NOT_FOUND = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Not found"}
}

PRODUCT_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string", "example": "Monitor curvo 49 pulgadas"},
                        "price": {"type": "number", "example": 5000},
                    },
                }
            }
        },
    }
}

PRODUCT_UPDATE_BODY = {
    **ID_PARAMETER,
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string", "example": "Monitor curvo 49 pulgadas"},
                        "price": {"type": "number", "example": 300},
                        "availability": {"type": "boolean", "example": True},
                    },
                }
            }
        },
    },
}


def _product_id(data: RequestInput) -> int:
    return int(data.params["id"])


def _find_or_404(store: ProductStore, product_id: int) -> Product:
    product = store.find_by_id(product_id)
    if product is None:
        logger.warning(f"Product with ID: {product_id} not found.")
        raise ProductNotFoundError(product_id)
    return product


def _envelope(product: Product) -> ProductData:
    return ProductData(data=ProductResponse.model_validate(product))


@router.get(
    "",
    response_model=ProductListData,
    summary="Get a list of products",
)
# Trailing-slash form, served directly instead of redirecting
@router.get("/", response_model=ProductListData, include_in_schema=False)
def get_products(store: ProductStore = Depends(get_store)):
    """
    Return a list of products, newest first.
    """
    products = store.find_all()
    logger.info(f"Retrieved {len(products)} products.")
    return ProductListData(
        data=[ProductResponse.model_validate(product) for product in products]
    )


@router.get(
    "/{id}",
    response_model=ProductData,
    summary="Get a product by ID",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=ID_PARAMETER,
)
def get_product_by_id(
    data: RequestInput = Depends(handle_input_errors(*PRODUCT_ID_RULES)),
    store: ProductStore = Depends(get_store),
):
    """
    Return a product based on its unique ID.
    """
    product_id = _product_id(data)
    logger.info(f"Fetching product with ID: {product_id}")
    return _envelope(_find_or_404(store, product_id))


@router.post(
    "",
    response_model=ProductData,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new product",
    responses=BAD_REQUEST,
    openapi_extra=PRODUCT_BODY,
)
@router.post(
    "/",
    response_model=ProductData,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_product(
    data: RequestInput = Depends(handle_input_errors(*CREATE_PRODUCT_RULES)),
    store: ProductStore = Depends(get_store),
):
    """
    Create a new record in the database. New products start out available.
    """
    payload = ProductCreate(
        name=to_string(data.body["name"]),
        price=to_number(data.body["price"]),
    )
    logger.info(f"Creating product: {payload.name}")
    product = store.create(payload)
    logger.info(f"Product '{product.name}' (ID: {product.id}) created successfully.")
    return _envelope(product)


@router.put(
    "/{id}",
    response_model=ProductData,
    summary="Updates a product with user input",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=PRODUCT_UPDATE_BODY,
)
def update_product(
    data: RequestInput = Depends(handle_input_errors(*UPDATE_PRODUCT_RULES)),
    store: ProductStore = Depends(get_store),
):
    """
    Replace the name, price and availability of an existing product.
    """
    product_id = _product_id(data)
    payload = ProductUpdate(
        name=to_string(data.body["name"]),
        price=to_number(data.body["price"]),
        availability=to_bool(data.body["availability"]),
    )
    logger.info(f"Updating product with ID: {product_id} with data: {payload.model_dump()}")
    product = _find_or_404(store, product_id)
    product = store.update(product, payload)
    logger.info(f"Product '{product.name}' (ID: {product_id}) updated successfully.")
    return _envelope(product)


@router.patch(
    "/{id}",
    response_model=ProductData,
    summary="Update Product availability",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=ID_PARAMETER,
)
def update_availability(
    data: RequestInput = Depends(handle_input_errors(*PRODUCT_ID_RULES)),
    store: ProductStore = Depends(get_store),
):
    """
    Flip the availability of an existing product.
    """
    product_id = _product_id(data)
    product = _find_or_404(store, product_id)
    product = store.toggle_availability(product)
    logger.info(f"Product (ID: {product_id}) availability set to {product.availability}.")
    return _envelope(product)


@router.delete(
    "/{id}",
    response_model=MessageData,
    summary="Deletes a product by a given ID",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=ID_PARAMETER,
)
def delete_product(
    data: RequestInput = Depends(handle_input_errors(*PRODUCT_ID_RULES)),
    store: ProductStore = Depends(get_store),
):
    """
    Remove a product from the database for good.
    """
    product_id = _product_id(data)
    logger.info(f"Attempting to delete product with ID: {product_id}")
    product = _find_or_404(store, product_id)
    store.delete(product)
    logger.info(f"Product (ID: {product_id}) deleted successfully.")
    return MessageData(data=PRODUCT_DELETED)
