from __future__ import annotations

import pytest

from textmagic_client.args import (
    convert_args,
    decamelize,
    require_fields,
    require_id_list,
    require_numeric,
    require_pagination,
    require_phone,
)
from textmagic_client.errors import ArgumentError


def test_convert_args_joins_sequences_and_drops_id_and_none() -> None:
    wire = convert_args({"id": 5, "phones": ["+111", "222"], "contacts": (1, 2), "text": "hi", "from": None})
    assert wire == {"phones": "+111,222", "contacts": "1,2", "text": "hi"}


def test_convert_args_sends_booleans_as_digits() -> None:
    assert convert_args({"cutExtra": False, "dummy": True}) == {"cutExtra": "0", "dummy": "1"}


def test_convert_args_keeps_camel_case_keys_by_default() -> None:
    assert convert_args({"templateId": 3}) == {"templateId": "3"}


def test_convert_args_namespaces_and_decamelizes() -> None:
    wire = convert_args({"firstName": "Ann", "lastName": "Lee"}, namespace="user", decamelize_keys=True)
    assert wire == {"user[first_name]": "Ann", "user[last_name]": "Lee"}


def test_decamelize() -> None:
    assert decamelize("companyName") == "company_name"
    assert decamelize("name") == "name"


@pytest.mark.parametrize("value", ["abc", "", None, "12a", -1, True, 1.5])
def test_require_numeric_rejects(value) -> None:
    with pytest.raises(ArgumentError, match="Message ID should be numeric"):
        require_numeric(value, "Message")


def test_require_numeric_accepts_ints_and_digit_strings() -> None:
    assert require_numeric(4820993, "Message") == "4820993"
    assert require_numeric("17", "Message") == "17"


def test_require_pagination_reports_offending_field() -> None:
    with pytest.raises(ArgumentError, match="page should be numeric"):
        require_pagination("x", 10)
    with pytest.raises(ArgumentError, match="limit should be numeric"):
        require_pagination(1, "ten")
    assert require_pagination(2, "20") == {"page": 2, "limit": "20"}


def test_require_phone() -> None:
    assert require_phone("+1555000111") == "+1555000111"
    assert require_phone("4471234") == "4471234"
    for bad in ("", "+", "555-0101", None):
        with pytest.raises(ArgumentError, match="valid phone number"):
            require_phone(bad)


def test_require_id_list() -> None:
    assert require_id_list([1, "2"], "bad") == ["1", "2"]
    for bad in ("1,2", [], ["a"], None):
        with pytest.raises(ArgumentError, match="bad"):
            require_id_list(bad, "bad")


def test_require_fields_treats_empty_values_as_missing() -> None:
    require_fields("missing", "a", [1], 0)
    with pytest.raises(ArgumentError, match="missing"):
        require_fields("missing", "a", "")
