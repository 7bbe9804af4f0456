# products_api/dependencies.py

"""
FastAPI dependencies shared by the product routes.
"""
import json
import logging
from typing import Any, Dict

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .db import get_db
from .exceptions import InputValidationError
from .store import ProductStore
from .validation import RequestInput, Rule, evaluate

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Return the request body as a JSON object.
    A missing, malformed or non-object body reads as {} so the rules can
    report which fields are absent.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.info(f"Ignoring malformed JSON body on {request.url.path}")
        return {}
    return payload if isinstance(payload, dict) else {}


def handle_input_errors(*rules: Rule):
    """
    Build the gate that sits between a route's rule chain and its handler.

    The returned dependency evaluates every rule against the request. When any
    of them fails it raises ``InputValidationError`` (rendered as a 400 with
    the full ``errors`` list) and the handler is never called; otherwise the
    handler receives the ``RequestInput`` the rules accepted.
    """

    async def dependency(request: Request) -> RequestInput:
        data = RequestInput(
            params=dict(request.path_params),
            body=await read_json_body(request),
        )
        failures = evaluate(rules, data)
        if failures:
            logger.info(
                f"Rejected {request.method} {request.url.path} with "
                f"{len(failures)} validation error(s)."
            )
            raise InputValidationError(failures)
        return data

    return dependency


def get_store(db: Session = Depends(get_db)) -> ProductStore:
    return ProductStore(db)
