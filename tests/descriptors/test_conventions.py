"""Tests for HTML casing and name-character rules."""

import pytest

from taghelpers.descriptors.conventions import (
    has_reserved_prefix,
    invalid_name_characters,
    strip_directive_prefix,
    strip_tag_helper_suffix,
    to_html_case,
)


class TestToHtmlCase:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("SingleAttribute", "single-attribute"),
            ("Single", "single"),
            ("HelloWorld", "hello-world"),
            ("CAPSOnOUTSIDE", "caps-on-outside"),
            ("ALLCAPS", "allcaps"),
            ("One1Two2Three3", "one1-two2-three3"),
            ("ONE1TWO2THREE3", "one1two2three3"),
            ("First_Second_ThirdHi", "first_second_third-hi"),
            ("SomeHTMLAttribute", "some-html-attribute"),
            ("lowercase", "lowercase"),
        ],
    )
    def test_given_pascal_name_when_html_cased_then_words_hyphenated(self, name: str, expected: str) -> None:
        assert to_html_case(name) == expected


class TestStripTagHelperSuffix:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("InputTagHelper", "Input"),
            ("Inputtaghelper", "Input"),
            ("TagHelper", ""),
            ("Input", "Input"),
            ("TagHelperInput", "TagHelperInput"),
        ],
    )
    def test_given_type_name_when_stripped_then_trailing_suffix_removed(self, name: str, expected: str) -> None:
        assert strip_tag_helper_suffix(name) == expected


class TestInvalidNameCharacters:
    @pytest.mark.parametrize("ch", list("!@/<>?[]=\"'*") + [" ", "\t", "\n"])
    def test_given_forbidden_char_twice_when_scanned_distinct_then_reported_once(self, ch: str) -> None:
        # Given
        name = f"{ch}hello{ch}"

        # When
        found = invalid_name_characters(name)

        # Then
        assert found == [ch]

    def test_given_mixed_chars_when_scanned_then_first_occurrence_order(self) -> None:
        assert invalid_name_characters("a=b@c=d!e@") == ["=", "@", "!"]

    def test_given_repeated_char_when_not_distinct_then_every_occurrence(self) -> None:
        assert invalid_name_characters("!a!b!", distinct=False) == ["!", "!", "!"]

    def test_given_valid_name_when_scanned_then_nothing_found(self) -> None:
        assert invalid_name_characters("asp-for") == []


class TestPrefixes:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("data-foo", True), ("DATA-foo", True), ("Data-", True), ("datafoo", False), (None, False)],
    )
    def test_given_name_when_checked_then_reserved_prefix_detected(self, name: str | None, expected: bool) -> None:
        assert has_reserved_prefix(name) is expected

    def test_given_directive_name_when_stripped_then_at_removed(self) -> None:
        assert strip_directive_prefix("@bind", True) == "bind"
        assert strip_directive_prefix("@bind", False) == "@bind"
