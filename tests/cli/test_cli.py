from pathlib import Path

from typer.testing import CliRunner

from medrefer.cli import app, render_outcome
from medrefer.functional_types import error, loading, success

runner = CliRunner()


def test_validate_accepts_good_input() -> None:
    result = runner.invoke(app, ["validate", "email", "Jane@Example.com"])
    assert result.exit_code == 0
    assert "Success(jane@example.com)" in result.output


def test_validate_rejects_bad_input() -> None:
    result = runner.invoke(app, ["validate", "icd10", "1A00"])
    assert result.exit_code == 1
    assert "valid ICD-10 code" in result.output


def test_validate_uses_field_name_option() -> None:
    result = runner.invoke(app, ["validate", "positive-integer", "0", "--field-name", "Quantity"])
    assert result.exit_code == 1
    assert "Quantity must be greater than 0" in result.output


def test_validate_chains_parsing_into_domain_checks() -> None:
    assert runner.invoke(app, ["validate", "age", "42"]).exit_code == 0
    assert runner.invoke(app, ["validate", "age", "200"]).exit_code == 1
    assert runner.invoke(app, ["validate", "dob", "1990-01-01"]).exit_code == 0
    assert runner.invoke(app, ["validate", "dob", "not-a-date"]).exit_code == 1


def test_validate_file_type_with_allow_list(tmp_path: Path) -> None:
    scan = tmp_path / "scan.png"
    scan.write_bytes(b"\x89PNG")
    assert runner.invoke(app, ["validate", "file-type", str(scan)]).exit_code == 0
    result = runner.invoke(app, ["validate", "file-type", str(scan), "--allow", ".pdf"])
    assert result.exit_code == 1


def test_unknown_kind_is_a_usage_error() -> None:
    result = runner.invoke(app, ["validate", "shoe-size", "42"])
    assert result.exit_code == 2


def test_verbose_flag_is_accepted() -> None:
    result = runner.invoke(app, ["--verbose", "validate", "required", "notes"])
    assert result.exit_code == 0


def test_kinds_lists_validators() -> None:
    result = runner.invoke(app, ["kinds"])
    assert result.exit_code == 0
    assert "email" in result.output
    assert "icd10" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_render_outcome_exit_codes() -> None:
    assert render_outcome(success(1)) == 0
    assert render_outcome(error("no")) == 1
    assert render_outcome(loading()) == 1
