"""Unit tests for IdentityNumber and masking."""

import pydantic
import pytest

from ninlink.domain.linking.model.value import (
    IdentityNumber,
    mask_identity_number,
    redact_identity_number,
)


class TestMaskIdentityNumber:
    def test_keeps_first_six_and_last_two(self) -> None:
        assert mask_identity_number("12345678901") == "123456***01"

    def test_exactly_eight_characters(self) -> None:
        assert mask_identity_number("ABCDEFGH") == "ABCDEF***GH"

    def test_shorter_than_eight_is_placeholder_only(self) -> None:
        assert mask_identity_number("1234567") == "***"

    def test_empty_is_placeholder(self) -> None:
        assert mask_identity_number("") == "***"

    def test_none_is_placeholder(self) -> None:
        assert mask_identity_number(None) == "***"

    def test_middle_never_survives(self) -> None:
        masked = mask_identity_number("01019912345")
        assert "9912" not in masked
        assert masked.startswith("010199")
        assert masked.endswith("45")


class TestRedactIdentityNumber:
    def test_every_occurrence_masked(self) -> None:
        text = "no user 12345678901 (query username=12345678901)"
        assert redact_identity_number(text, "12345678901") == (
            "no user 123456***01 (query username=123456***01)"
        )

    def test_text_without_number_unchanged(self) -> None:
        assert redact_identity_number("user store down", "12345678901") == "user store down"

    def test_empty_value_leaves_text_alone(self) -> None:
        assert redact_identity_number("user store down", "") == "user store down"

    def test_method_on_identity_number(self) -> None:
        assert IdentityNumber(" 12345678901 ").redact("bad 12345678901") == "bad 123456***01"


class TestIdentityNumber:
    def test_value_is_trimmed(self) -> None:
        nin = IdentityNumber("  12345678901 \n")
        assert nin.root == "12345678901"

    def test_blank_value_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            IdentityNumber("   ")

    def test_str_is_masked(self) -> None:
        nin = IdentityNumber("12345678901")
        assert str(nin) == "123456***01"
        assert "12345678901" not in f"{nin}"

    def test_repr_is_masked(self) -> None:
        nin = IdentityNumber("12345678901")
        assert "12345678901" not in repr(nin)

    def test_equality_uses_raw_value(self) -> None:
        assert IdentityNumber("12345678901") == IdentityNumber(" 12345678901")
        assert hash(IdentityNumber("12345678901")) == hash(IdentityNumber("12345678901"))
