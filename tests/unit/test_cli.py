"""Unit tests for the fieldrules CLI."""

import json

from typer.testing import CliRunner

from fieldrules import __version__
from fieldrules.cli import app

VALID_ID = "0123456789abcdef0123456789abcdef0123"

runner = CliRunner()


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestCheckCommand:
    """Test the check command."""

    def test_valid_record(self, tmp_path):
        data = write_json(tmp_path / "user.json", {"id": VALID_ID, "age": 30})

        result = runner.invoke(app, ["check", "sample_records:User", str(data)])

        assert result.exit_code == 0
        assert "All 1 records are valid" in result.stdout

    def test_invalid_record_table(self, tmp_path):
        data = write_json(tmp_path / "app.json", [{"version": "12345"}, {"version": "1"}])

        result = runner.invoke(app, ["check", "sample_records:App", str(data)])

        assert result.exit_code == 1
        assert "1 of 2 records failed validation" in result.stdout

    def test_json_output(self, tmp_path):
        data = write_json(tmp_path / "app.json", [{"version": "12345"}, {"version": "1"}])

        result = runner.invoke(app, ["check", "sample_records:App", str(data), "--format", "json"])

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["total"] == 2
        assert payload["failed"] == 1
        assert payload["records"][0]["valid"] is True
        assert payload["records"][1]["errors"][0]["field"] == "version"
        assert payload["records"][1]["errors"][0]["message"] == (
            "validation error: field version: length of string is not equal"
        )

    def test_pydantic_target(self, tmp_path):
        data = write_json(tmp_path / "account.json", {"login": "al", "tags": ["red"]})

        result = runner.invoke(app, ["check", "sample_records:Account", str(data), "-f", "json"])

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["records"][0]["errors"][0]["message"] == (
            "validation error: field login: len of string is less than allowed"
        )

    def test_custom_tag_key_from_config(self, tmp_path):
        data = write_json(tmp_path / "app.json", {"version": "1"})
        config = write_json(tmp_path / "config.json", {"rules": {"tagKey": "other"}})

        result = runner.invoke(app, ["check", "sample_records:App", str(data), "--config", str(config)])

        assert result.exit_code == 0

    def test_invalid_format(self, tmp_path):
        data = write_json(tmp_path / "app.json", {"version": "12345"})

        result = runner.invoke(app, ["check", "sample_records:App", str(data), "--format", "xml"])

        assert result.exit_code == 1
        assert "Invalid format" in result.stdout

    def test_bad_target(self, tmp_path):
        data = write_json(tmp_path / "app.json", {"version": "12345"})

        result = runner.invoke(app, ["check", "sample_records", str(data)])

        assert result.exit_code == 1
        assert "module:Class" in result.stdout

    def test_missing_config_file(self, tmp_path):
        data = write_json(tmp_path / "app.json", {"version": "12345"})
        missing = tmp_path / "missing.json"

        result = runner.invoke(app, ["check", "sample_records:App", str(data), "--config", str(missing)])

        assert result.exit_code == 1
        assert "Configuration file not found" in result.stdout

    def test_unexported_field_is_named(self, tmp_path):
        data = write_json(tmp_path / "secret.json", {"_key": "x"})

        result = runner.invoke(app, ["check", "sample_records:Secret", str(data), "-f", "json"])

        assert result.exit_code == 1
        entry = json.loads(result.stdout)["records"][0]["errors"][0]
        assert entry["field"] == "_key"
        assert entry["kind"] == "UnexportedFieldError"

    def test_missing_data_file(self, tmp_path):
        result = runner.invoke(app, ["check", "sample_records:App", str(tmp_path / "none.json")])

        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestParseCommand:
    """Test the parse command."""

    def test_parse_known_rule(self):
        result = runner.invoke(app, ["parse", "in:a,b"])

        assert result.exit_code == 0
        assert "Kind: in" in result.stdout
        assert "Argument: a,b" in result.stdout

    def test_parse_unknown_kind(self):
        result = runner.invoke(app, ["parse", "regexp:x"])

        assert result.exit_code == 0
        assert "Unknown rule kind" in result.stdout

    def test_parse_syntax_error(self):
        result = runner.invoke(app, ["parse", "len5"])

        assert result.exit_code == 1
        assert "invalid validator syntax" in result.stdout


class TestMiscCommands:
    """Test rules listing and version."""

    def test_rules(self):
        result = runner.invoke(app, ["rules"])

        assert result.exit_code == 0
        for kind in ("len", "min", "max", "in"):
            assert kind in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout
