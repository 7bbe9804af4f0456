# products_api/validation.py

"""
Declarative validation rules for the Products API.

Every route owns an ordered chain of rules. A rule is a plain function that
takes the request input (path params and JSON body) and returns a list of
``ValidationFailure`` objects, empty when the input is acceptable. Chains are
evaluated in full so the client sees every problem at once, in the order the
rules are declared.

Values are compared the way a JSON client sends them: numbers, booleans and
numeric strings are all accepted where they make sense, and anything else is
turned into a failure instead of an exception.
"""
import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List


class _Missing:
    """Marks a field that was not sent at all (different from an explicit null)."""

    def __repr__(self):
        return "MISSING"


MISSING: Any = _Missing()

INVALID_ID = "ID no válido"
NAME_REQUIRED = "El nombre de Producto no puede ir vacio"
PRICE_NOT_NUMERIC = "Valor no válido"
PRICE_REQUIRED = "El precio de Producto no puede ir vacio"
PRICE_NOT_POSITIVE = "Precio no válido"
AVAILABILITY_NOT_BOOLEAN = "Valor para disponibilidad no válido"

_INT_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
_NUMBER_LITERAL_RE = re.compile(r"^[+-]?([0-9]+[.]?[0-9]*|[.][0-9]+)([eE][+-]?[0-9]+)?$")
_BOOLEAN_STRINGS = ("true", "false", "1", "0")
_TRUE_STRINGS = ("true", "1")


@dataclass(frozen=True)
class RequestInput:
    """The parts of a request that rules look at."""

    params: Dict[str, str] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)

    def get(self, location: str, name: str) -> Any:
        return getattr(self, location).get(name, MISSING)


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    message: str
    location: str = "body"
    value: Any = MISSING

    def to_dict(self) -> Dict[str, Any]:
        item: Dict[str, Any] = {"type": "field"}
        if self.value is not MISSING:
            item["value"] = self.value
        item["msg"] = self.message
        item["path"] = self.field
        item["location"] = self.location
        return item


Rule = Callable[[RequestInput], List[ValidationFailure]]


# -----------------------------
# Value coercion
# -----------------------------


def to_string(value: Any) -> str:
    """
    Render a JSON value as the string the checks operate on.
    Absent, null and structured values (lists, objects) become "".
    """
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float, str)):
        return str(value)
    return ""


def to_number(value: Any) -> float:
    """
    Coerce a JSON value to a float, NaN when it is not a number or does not
    fit in a finite float.
    """
    if value is MISSING or value is None:
        return math.nan
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
        if not _NUMBER_LITERAL_RE.match(value):
            return math.nan
    elif not isinstance(value, (int, float)):
        return math.nan
    try:
        number = float(value)
    except OverflowError:
        return math.nan
    return number if math.isfinite(number) else math.nan


def to_bool(value: Any) -> bool:
    return to_string(value).lower() in _TRUE_STRINGS


# -----------------------------
# Checks
# -----------------------------


def is_int(value: Any) -> bool:
    return bool(_INT_RE.match(to_string(value)))


def is_numeric(value: Any) -> bool:
    return bool(_NUMERIC_RE.match(to_string(value)))


def is_not_empty(value: Any) -> bool:
    return to_string(value).strip() != ""


def is_positive(value: Any) -> bool:
    # NaN compares false, so absent and non-numeric values fail here too
    return to_number(value) > 0


def is_boolean(value: Any) -> bool:
    return to_string(value) in _BOOLEAN_STRINGS


def field_rule(
    location: str, name: str, check: Callable[[Any], bool], message: str
) -> Rule:
    """Build a rule that reports ``message`` when ``check`` rejects the field."""

    def rule(data: RequestInput) -> List[ValidationFailure]:
        value = data.get(location, name)
        if check(value):
            return []
        return [ValidationFailure(name, message, location, value)]

    rule.__name__ = f"{location}_{name}_{check.__name__}"
    return rule


def evaluate(rules: Iterable[Rule], data: RequestInput) -> List[ValidationFailure]:
    """Run every rule of a chain and collect the failures in declaration order."""
    failures: List[ValidationFailure] = []
    for rule in rules:
        failures.extend(rule(data))
    return failures


# -----------------------------
# Rule chains per route
# -----------------------------

product_id_rules: List[Rule] = [
    field_rule("params", "id", is_int, INVALID_ID),
]

product_name_rules: List[Rule] = [
    field_rule("body", "name", is_not_empty, NAME_REQUIRED),
]

product_price_rules: List[Rule] = [
    field_rule("body", "price", is_numeric, PRICE_NOT_NUMERIC),
    field_rule("body", "price", is_not_empty, PRICE_REQUIRED),
    field_rule("body", "price", is_positive, PRICE_NOT_POSITIVE),
]

availability_rules: List[Rule] = [
    field_rule("body", "availability", is_boolean, AVAILABILITY_NOT_BOOLEAN),
]

CREATE_PRODUCT_RULES: List[Rule] = product_name_rules + product_price_rules

UPDATE_PRODUCT_RULES: List[Rule] = (
    product_id_rules + product_name_rules + product_price_rules + availability_rules
)

PRODUCT_ID_RULES: List[Rule] = product_id_rules
