# products_api/__main__.py

from .main import run

run()
