# tests/test_validation.py

"""Unit tests for the validation rules and rule chains."""

import math

import pytest

from products_api.validation import (
    AVAILABILITY_NOT_BOOLEAN,
    CREATE_PRODUCT_RULES,
    INVALID_ID,
    MISSING,
    NAME_REQUIRED,
    PRICE_NOT_NUMERIC,
    PRICE_NOT_POSITIVE,
    PRICE_REQUIRED,
    PRODUCT_ID_RULES,
    UPDATE_PRODUCT_RULES,
    RequestInput,
    ValidationFailure,
    evaluate,
    field_rule,
    is_boolean,
    is_int,
    is_not_empty,
    is_numeric,
    to_bool,
    to_number,
)


def messages(failures):
    return [failure.message for failure in failures]


@pytest.mark.parametrize("value", ["1", "42", "-3", "+7", "007"])
def test_is_int_accepts_integers(value):
    assert is_int(value)


@pytest.mark.parametrize("value", ["invalid-id", "1.5", "", " 1", "1e3", MISSING])
def test_is_int_rejects_everything_else(value):
    assert not is_int(value)


@pytest.mark.parametrize("value", [50, 0, 19.99, "19.99", "-4", ".5"])
def test_is_numeric_accepts_numbers(value):
    assert is_numeric(value)


@pytest.mark.parametrize("value", ["Hola", "", None, MISSING, True, "1e3", [1], {"a": 1}])
def test_is_numeric_rejects_non_numbers(value):
    assert not is_numeric(value)


def test_is_not_empty_trims_whitespace():
    assert is_not_empty("Mouse")
    assert is_not_empty(0)
    assert not is_not_empty("   ")
    assert not is_not_empty(None)
    assert not is_not_empty(MISSING)


@pytest.mark.parametrize("value", [True, False, "true", "false", "1", "0", 1, 0])
def test_is_boolean_accepts_boolean_like_values(value):
    assert is_boolean(value)


@pytest.mark.parametrize("value", ["yes", "True", 2, None, MISSING, ""])
def test_is_boolean_rejects_other_values(value):
    assert not is_boolean(value)


def test_to_number():
    assert to_number(50) == 50.0
    assert to_number("19.99") == 19.99
    assert to_number("") == 0.0
    assert math.isnan(to_number("Hola"))
    assert math.isnan(to_number(MISSING))


def test_to_bool():
    assert to_bool(True) is True
    assert to_bool("1") is True
    assert to_bool("false") is False
    assert to_bool(0) is False


def test_field_rule_reports_value_and_location():
    rule = field_rule("params", "id", is_int, INVALID_ID)

    assert rule(RequestInput(params={"id": "7"})) == []
    assert rule(RequestInput(params={"id": "x"})) == [
        ValidationFailure("id", INVALID_ID, "params", "x")
    ]


def test_failure_to_dict_omits_missing_value():
    assert ValidationFailure("name", NAME_REQUIRED).to_dict() == {
        "type": "field",
        "msg": NAME_REQUIRED,
        "path": "name",
        "location": "body",
    }
    assert ValidationFailure("price", PRICE_NOT_POSITIVE, value=0).to_dict()["value"] == 0


def test_create_chain_on_empty_body():
    failures = evaluate(CREATE_PRODUCT_RULES, RequestInput())

    assert messages(failures) == [
        NAME_REQUIRED,
        PRICE_NOT_NUMERIC,
        PRICE_REQUIRED,
        PRICE_NOT_POSITIVE,
    ]


@pytest.mark.parametrize(
    "price, expected",
    [
        (50, []),
        ("50", []),
        (0, [PRICE_NOT_POSITIVE]),
        (-5, [PRICE_NOT_POSITIVE]),
        ("Hola", [PRICE_NOT_NUMERIC, PRICE_NOT_POSITIVE]),
        (None, [PRICE_NOT_NUMERIC, PRICE_REQUIRED, PRICE_NOT_POSITIVE]),
    ],
)
def test_create_chain_price_checks(price, expected):
    data = RequestInput(body={"name": "Monitor curvo", "price": price})

    assert messages(evaluate(CREATE_PRODUCT_RULES, data)) == expected


def test_update_chain_on_empty_body():
    failures = evaluate(UPDATE_PRODUCT_RULES, RequestInput(params={"id": "1"}))

    assert len(failures) == 5
    assert messages(failures)[-1] == AVAILABILITY_NOT_BOOLEAN


def test_update_chain_keeps_declaration_order():
    data = RequestInput(
        params={"id": "abc"},
        body={"name": "", "price": 10, "availability": "maybe"},
    )

    assert messages(evaluate(UPDATE_PRODUCT_RULES, data)) == [
        INVALID_ID,
        NAME_REQUIRED,
        AVAILABILITY_NOT_BOOLEAN,
    ]


def test_id_chain_ignores_body():
    data = RequestInput(params={"id": "3"}, body={"price": "nope"})

    assert evaluate(PRODUCT_ID_RULES, data) == []


def test_to_number_rejects_values_beyond_float_range():
    assert math.isnan(to_number(10**400))
    assert math.isnan(to_number("1" + "0" * 400))
    assert math.isnan(to_number(float("inf")))


@pytest.mark.parametrize("price", [10**400, "1" + "0" * 400])
def test_create_chain_out_of_range_price_is_a_failure_not_an_error(price):
    data = RequestInput(body={"name": "Monitor curvo", "price": price})

    assert messages(evaluate(CREATE_PRODUCT_RULES, data)) == [PRICE_NOT_POSITIVE]
