"""Tests for required-attribute selector parsing."""

import pytest

from taghelpers.descriptors.builders import TagMatchingRuleDescriptorBuilder
from taghelpers.descriptors.models import NameComparison, ValueComparison
from taghelpers.discovery.required_attributes import add_required_attributes, parse_required_attributes


def _ids(text: str) -> list[list[str]]:
    return [[d.id for d in a.diagnostics] for a in parse_required_attributes(text)]


class TestValidSelectors:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("name", ("name", NameComparison.FULL_MATCH, None, ValueComparison.NONE)),
            ("name-*", ("name-", NameComparison.PREFIX_MATCH, None, ValueComparison.NONE)),
            ("[name]", ("name", NameComparison.FULL_MATCH, None, ValueComparison.NONE)),
            ("[name=value]", ("name", NameComparison.FULL_MATCH, "value", ValueComparison.FULL_MATCH)),
            ("[name^=]", ("name", NameComparison.FULL_MATCH, "", ValueComparison.PREFIX_MATCH)),
            ("[name$=.js]", ("name", NameComparison.FULL_MATCH, ".js", ValueComparison.SUFFIX_MATCH)),
            ("[ name = 'va lue' ]", ("name", NameComparison.FULL_MATCH, "va lue", ValueComparison.FULL_MATCH)),
            ('[name="a,b"]', ("name", NameComparison.FULL_MATCH, "a,b", ValueComparison.FULL_MATCH)),
            ("  name  ", ("name", NameComparison.FULL_MATCH, None, ValueComparison.NONE)),
        ],
    )
    def test_given_single_selector_when_parsed_then_fields_match(
        self, text: str, expected: tuple[str, NameComparison, str | None, ValueComparison]
    ) -> None:
        # When
        attributes = parse_required_attributes(text)

        # Then
        assert len(attributes) == 1
        attribute = attributes[0]
        assert (attribute.name, attribute.name_comparison, attribute.value, attribute.value_comparison) == expected
        assert attribute.diagnostics == ()

    def test_given_list_when_parsed_then_order_preserved_without_dedupe(self) -> None:
        # When
        attributes = parse_required_attributes("class, [type=text], data-*, class")

        # Then
        assert [a.display_name for a in attributes] == ["class", "type", "data-...", "class"]

    @pytest.mark.parametrize("text", [None, ""])
    def test_given_no_text_when_parsed_then_nothing(self, text: str | None) -> None:
        assert parse_required_attributes(text) == ()

    def test_given_rule_builder_when_added_then_attributes_appended(self) -> None:
        # Given
        rule = TagMatchingRuleDescriptorBuilder()
        rule.tag_name = "input"
        rule.attribute("existing")

        # When
        add_required_attributes("a, b", rule)

        # Then
        assert [a.name for a in rule.build().attributes] == ["existing", "a", "b"]


class TestErrorRecovery:
    def test_given_unclosed_bracket_when_parsed_then_one_end_brace_diagnostic(self) -> None:
        attributes = parse_required_attributes("[name")

        assert [a.name for a in attributes] == ["name"]
        assert _ids("[name") == [["RZ3101"]]

    def test_given_trailing_comma_when_parsed_then_one_end_brace_diagnostic(self) -> None:
        attributes = parse_required_attributes("name,")

        assert [a.name for a in attributes] == ["name"]
        assert _ids("name,") == [["RZ3101"]]

    def test_given_partial_operator_when_parsed_then_partial_diagnostic(self) -> None:
        # When
        attributes = parse_required_attributes("[name^value]")

        # Then
        assert attributes[0].name == "name"
        assert attributes[0].diagnostics[0].id == "RZ3103"
        assert attributes[0].diagnostics[0].args == ("^", "[name^value]")

    def test_given_unknown_operator_when_parsed_then_operator_diagnostic(self) -> None:
        assert _ids("[name ! value]") == [["RZ3104"]]

    def test_given_unterminated_quote_when_parsed_then_mismatched_quotes(self) -> None:
        # When
        attributes = parse_required_attributes("[name='value]")

        # Then
        diagnostic = attributes[0].diagnostics[0]
        assert diagnostic.id == "RZ3105"
        assert diagnostic.args[0] == "'"

    def test_given_trailing_junk_when_parsed_then_invalid_character_and_resume(self) -> None:
        # When
        attributes = parse_required_attributes("name x, other")

        # Then
        assert [a.name for a in attributes] == ["name", "other"]
        assert attributes[0].diagnostics[0].id == "RZ3102"
        assert attributes[0].diagnostics[0].args == ("x", "name x, other")
        assert attributes[1].diagnostics == ()

    def test_given_bad_selector_mid_list_when_parsed_then_rest_still_parsed(self) -> None:
        # When
        attributes = parse_required_attributes("[a^b], [c=d], e")

        # Then
        assert [a.name for a in attributes] == ["a", "c", "e"]
        assert _ids("[a^b], [c=d], e") == [["RZ3103"], [], []]

    def test_given_forbidden_chars_when_parsed_then_one_diagnostic_per_occurrence(self) -> None:
        # When
        diagnostics = parse_required_attributes("!na!me!")[0].diagnostics

        # Then
        assert [(d.id, d.args[1]) for d in diagnostics] == [("RZ3012", "!")] * 3

    def test_given_whitespace_only_when_parsed_then_whitespace_diagnostic(self) -> None:
        assert _ids("   ") == [["RZ3011"]]
