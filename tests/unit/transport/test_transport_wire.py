"""Tests for WireModel decoding/encoding rules and translation helpers."""

from enum import Enum

import pytest
from pydantic import ValidationError

from finbind.transport.convert import code_or_raw, code_to_wire, map_list, map_tuple, optional
from finbind.transport.wire import WireInt, WireModel


class Inner(WireModel):
    item_name: str = ""


class Sample(WireModel):
    account_id: str = ""
    total_amount: WireInt = None
    has_next: bool = False
    inner: Inner | None = None
    items: list[Inner] | None = None


class Color(str, Enum):
    RED = "1"
    BLUE = "2"


class TestWireModelDecoding:
    """Tests for decoding rules."""

    def test_camel_case_keys(self) -> None:
        sample = Sample.model_validate({"accountId": "1", "totalAmount": "500"})

        assert sample.account_id == "1"
        assert sample.total_amount == 500

    def test_keys_matched_case_insensitively(self) -> None:
        sample = Sample.model_validate({"AccountId": "1", "HASNEXT": True})

        assert sample.account_id == "1"
        assert sample.has_next is True

    def test_exact_key_wins_over_case_folded_duplicate(self) -> None:
        sample = Sample.model_validate({"ACCOUNTID": "folded", "accountId": "exact"})

        assert sample.account_id == "exact"

    def test_field_names_accepted(self) -> None:
        assert Sample(account_id="1").account_id == "1"

    def test_unknown_keys_ignored_and_missing_defaulted(self) -> None:
        sample = Sample.model_validate({"somethingElse": 1})

        assert sample == Sample()

    def test_numbers_read_into_text_fields(self) -> None:
        assert Sample.model_validate({"accountId": 111}).account_id == "111"

    def test_nulls_take_field_defaults(self) -> None:
        sample = Sample.model_validate({"accountId": None, "hasNext": None, "totalAmount": None})

        assert sample == Sample()

    def test_nested_keys_case_insensitive(self) -> None:
        sample = Sample.model_validate({"Items": [{"ItemName": "a"}], "INNER": {"itemname": "b"}})

        assert sample.items == [Inner(item_name="a")]
        assert sample.inner == Inner(item_name="b")


class TestWireInt:
    """Tests for the string-carried integer type."""

    @pytest.mark.parametrize("value,expected", [("1000", 1000), (1000, 1000), ("", None), (None, None)])
    def test_decoding(self, value, expected) -> None:
        assert Sample.model_validate({"totalAmount": value}).total_amount == expected

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Sample.model_validate({"totalAmount": "abc"})

    def test_serialized_as_string(self) -> None:
        assert Sample(total_amount=1000).to_body()["totalAmount"] == "1000"


class TestToBody:
    """Tests for request body serialization."""

    def test_none_fields_dropped(self) -> None:
        assert Sample(account_id="1").to_body() == {"accountId": "1", "hasNext": False}

    def test_empty_strings_kept_by_default(self) -> None:
        assert Sample().to_body()["accountId"] == ""

    def test_omit_empty_drops_empty_strings_at_any_depth(self) -> None:
        body = Sample(inner=Inner(), items=[Inner(), Inner(item_name="x")]).to_body(
            omit_empty=True
        )

        assert body == {"hasNext": False, "inner": {}, "items": [{}, {"itemName": "x"}]}

    def test_empty_list_kept(self) -> None:
        assert Sample(items=[]).to_body(omit_empty=True)["items"] == []


class TestConvertHelpers:
    """Tests for the translation helpers."""

    def test_code_or_raw(self) -> None:
        assert code_or_raw(Color, "1") is Color.RED
        assert code_or_raw(Color, "9") == "9"

    def test_code_to_wire(self) -> None:
        assert code_to_wire(Color.BLUE) == "2"
        assert code_to_wire("9") == "9"
        assert code_to_wire(None) is None

    def test_optional(self) -> None:
        assert optional(None, str) is None
        assert optional(1, str) == "1"

    def test_map_list_and_tuple_keep_absent_vs_empty(self) -> None:
        assert map_list(None, str) is None
        assert map_list((), str) == []
        assert map_list((1, 2), str) == ["1", "2"]
        assert map_tuple(None, str) is None
        assert map_tuple([], str) == ()
        assert map_tuple([2, 1], str) == ("2", "1")
