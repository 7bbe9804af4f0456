# products_api/main.py

"""
FastAPI Products API.
Exposes CRUD operations over products under /api/products, with per-route
validation rules, uniform error bodies and generated OpenAPI docs at /docs.
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings
from .db import Base, build_engine, build_session_factory
from .exceptions import InputValidationError, ProductNotFoundError
from .middleware import OriginGuardMiddleware, RequestLoggingMiddleware
from .routes import router as products_router

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Error interno del servidor"

DOCS_TITLE = "Documentación REST API FastAPI / SQLAlchemy / Python"
DOCS_CSS = """
    .topbar-wrapper .link {
        content: url('https://cdn-icons-png.freepik.com/512/10195/10195335.png');
        height: 100px;
    }

    .swagger-ui .topbar {
        background-color: #2B3B45;
    }
"""


# -----------------------------
# Configure Logging
# -----------------------------
def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # Request lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Ensure the products table exists before serving requests.
    An unreachable database is logged and the app keeps running; requests
    that need the database will then fail with a 500.
    """
    try:
        Base.metadata.create_all(bind=app.state.engine)
        logger.info("Connected to the database and ensured tables exist.")
    except SQLAlchemyError as e:
        logger.error(f"Could not connect to the database: {e}")

    yield

    app.state.engine.dispose()


# -----------------------------
# Exception handlers
# -----------------------------
async def input_validation_error_handler(request: Request, exc: InputValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [failure.to_dict() for failure in exc.failures]},
    )


async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": str(exc)},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        f"Database error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR},
    )


# -----------------------------
# FastAPI App Initialization
# -----------------------------
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and its database handles from ``settings``."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="REST API FastAPI / SQLAlchemy / Python",
        description="API Docs for Products",
        version="1.8.0",
        lifespan=lifespan,
        docs_url=None,
        openapi_tags=[
            {"name": "Products", "description": "API operations related to products"}
        ],
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)

    # Starlette runs the last added middleware first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginGuardMiddleware, allowed_origins=settings.allowed_origins)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(InputValidationError, input_validation_error_handler)
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    app.include_router(products_router, prefix="/api/products", tags=["Products"])

    @app.get("/docs", include_in_schema=False)
    async def swagger_ui_html():
        page = get_swagger_ui_html(openapi_url=app.openapi_url, title=DOCS_TITLE)
        html = page.body.decode("utf-8").replace(
            "</head>", f"<style>{DOCS_CSS}</style></head>", 1
        )
        return HTMLResponse(html)

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info(f"REST API en el puerto {settings.port}")
    uvicorn.run(
        "products_api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
    )
