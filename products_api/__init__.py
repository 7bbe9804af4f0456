# products_api/__init__.py

"""REST API over a single Product resource."""

from .main import create_app

__all__ = ["create_app"]
