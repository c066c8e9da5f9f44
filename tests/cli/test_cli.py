"""Tests for the thd command-line interface."""

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from taghelpers import __version__
from taghelpers.cli.main import cli

MANIFEST = {
    "assembly": "TestAssembly",
    "types": [
        {
            "name": "BoldTagHelper",
            "namespace": "Test",
            "interfaces": ["Microsoft.AspNetCore.Razor.TagHelpers.ITagHelper"],
            "properties": [{"name": "Title", "type": "System.String"}],
        },
    ],
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def manifest(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A one-type manifest, with no global or project config in effect."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("taghelpers.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml")
    path = tmp_path / "types.yaml"
    path.write_text(yaml.safe_dump(MANIFEST))
    return path


class TestCli:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_given_help_when_invoked_then_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ("describe", "parse-attributes", "rewrite-type", "html-case"):
            assert command in result.output


class TestDescribeCommand:
    def test_given_manifest_when_described_as_json_then_descriptors_printed(
        self, runner: CliRunner, manifest: Path
    ) -> None:
        # When
        result = runner.invoke(cli, ["describe", str(manifest), "--json"])

        # Then
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data[0]["kind"] == "Default"
        assert data[0]["name"] == "Test.BoldTagHelper"
        assert data[0]["tag_matching_rules"][0]["tag_name"] == "bold"
        assert data[0]["bound_attributes"][0]["name"] == "title"
        assert [d["kind"] for d in data[-3:]] == ["Ref", "Key", "Splat"]

    def test_given_manifest_when_described_then_summary_reported(self, runner: CliRunner, manifest: Path) -> None:
        # When
        result = runner.invoke(cli, ["describe", str(manifest)])

        # Then
        assert result.exit_code == 0, result.output
        assert "tag helpers" in result.output

    def test_given_config_file_when_described_then_producers_limited(
        self, runner: CliRunner, manifest: Path, tmp_path: Path
    ) -> None:
        # Given
        config_path = tmp_path / "thd.yaml"
        config_path.write_text(yaml.safe_dump({"producers": {"enabled": ["default"]}}))

        # When
        result = runner.invoke(cli, ["describe", str(manifest), "--config", str(config_path), "--json"])

        # Then
        assert result.exit_code == 0, result.output
        assert [d["kind"] for d in json.loads(result.stdout)] == ["Default"]

    def test_given_file_log_output_when_described_then_events_written(
        self, runner: CliRunner, manifest: Path, tmp_path: Path
    ) -> None:
        # Given
        log_path = tmp_path / "logs" / "thd.log"
        config_path = tmp_path / "thd.yaml"
        config_path.write_text(
            yaml.safe_dump(
                {"logging": {"level": "DEBUG", "outputs": [{"format": "json", "destination": str(log_path)}]}}
            )
        )

        # When
        result = runner.invoke(cli, ["describe", str(manifest), "--config", str(config_path), "--json"])

        # Then
        assert result.exit_code == 0, result.output
        events = [json.loads(line)["event"] for line in log_path.read_text().splitlines()]
        assert "discovery_complete" in events

    def test_given_verbose_flag_when_described_then_overrides_configured_level(
        self, runner: CliRunner, manifest: Path, tmp_path: Path
    ) -> None:
        # Given
        log_path = tmp_path / "thd.log"
        config_path = tmp_path / "thd.yaml"
        config_path.write_text(
            yaml.safe_dump(
                {"logging": {"level": "WARNING", "outputs": [{"format": "json", "destination": str(log_path)}]}}
            )
        )

        # When
        quiet = runner.invoke(cli, ["describe", str(manifest), "--config", str(config_path), "--json"])
        quiet_log = log_path.read_text() if log_path.exists() else ""
        verbose = runner.invoke(cli, ["-v", "describe", str(manifest), "--config", str(config_path), "--json"])

        # Then
        assert quiet.exit_code == 0, quiet.output
        assert verbose.exit_code == 0, verbose.output
        assert "discovery_complete" not in quiet_log
        assert "discovery_complete" in log_path.read_text()

    def test_given_missing_config_when_described_then_error(
        self, runner: CliRunner, manifest: Path, tmp_path: Path
    ) -> None:
        result = runner.invoke(cli, ["describe", str(manifest), "--config", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "missing.yaml" in result.output

    def test_given_invalid_manifest_when_described_then_error(self, runner: CliRunner, manifest: Path) -> None:
        # Given
        manifest.write_text("types: [unclosed")

        # When
        result = runner.invoke(cli, ["describe", str(manifest)])

        # Then
        assert result.exit_code == 1
        assert "Error" in result.output


class TestParseAttributesCommand:
    def test_given_valid_selector_when_parsed_as_json_then_attributes_printed(self, runner: CliRunner) -> None:
        # When
        result = runner.invoke(cli, ["parse-attributes", "class, [type=text]", "--json"])

        # Then
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [a["name"] for a in data] == ["class", "type"]
        assert data[1]["value"] == "text"
        assert data[1]["value_comparison"] == "FullMatch"

    def test_given_invalid_selector_when_parsed_then_exit_code_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-attributes", "[type=text"])

        assert result.exit_code == 1
        assert "RZ3" in result.output


class TestRewriteTypeCommand:
    def test_given_bindings_when_rewritten_then_substituted(self, runner: CliRunner) -> None:
        # When
        result = runner.invoke(
            cli,
            [
                "rewrite-type",
                "TItem1.TItem2<TItem1, TItem2, TItem3>",
                "--bind",
                "TItem1=Type1",
                "--bind",
                "TItem2=Type2",
                "--unspecified",
                "TItem3",
            ],
        )

        # Then
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "TItem1.TItem2<Type1, Type2, System.Object>"

    def test_given_global_qualify_when_rewritten_then_parameters_left_bare(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "rewrite-type",
                "TItem2<System.String, TItem1>",
                "--global-qualify",
                "--param",
                "TItem1",
                "--param",
                "TItem2",
            ],
        )

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "TItem2<global::System.String, TItem1>"

    def test_given_bound_parameter_when_global_qualified_then_substitution_qualified(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["rewrite-type", "List<TItem>", "--bind", "TItem=Test.Item", "--param", "TItem", "--global-qualify"]
        )

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "global::List<global::Test.Item>"

    def test_given_malformed_binding_when_rewritten_then_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rewrite-type", "T", "--bind", "T"])

        assert result.exit_code == 2
        assert "NAME=TYPE" in result.output


class TestHtmlCaseCommand:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("SomeHTMLAttribute", "some-html-attribute"), ("Title", "title")],
    )
    def test_given_name_when_converted_then_kebab_case(self, runner: CliRunner, name: str, expected: str) -> None:
        result = runner.invoke(cli, ["html-case", name])

        assert result.exit_code == 0
        assert result.output.strip() == expected
