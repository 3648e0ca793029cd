import pytest
from typer.testing import CliRunner

from badge_print.injector import PRINT_STYLE_ID
from run import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def in_repo_root(repo_root, monkeypatch):
    monkeypatch.chdir(repo_root)


def test_geometry_default_profile():
    result = runner.invoke(app, ["geometry"])
    assert result.exit_code == 0, result.output
    assert "Paper: A4 portrait (210.0mm × 297.0mm)" in result.output
    assert "Printable: 190.0mm × 277.0mm" in result.output
    assert "Badges per page: 10 (2 × 5 layout)" in result.output


def test_geometry_overrides():
    result = runner.invoke(app, ["geometry", "--orientation", "landscape", "--margin", "2"])
    assert result.exit_code == 0, result.output
    assert "Paper: A4 landscape (297.0mm × 210.0mm)" in result.output
    assert "Printable: 293.0mm × 206.0mm" in result.output
    assert "Margins < 5mm" in result.output


def test_geometry_rejects_bad_orientation():
    result = runner.invoke(app, ["geometry", "--orientation", "sideways"])
    assert result.exit_code == 1


def test_geometry_unknown_profile():
    result = runner.invoke(app, ["geometry", "--profile", "nope"])
    assert result.exit_code == 1


def test_validate_ok():
    result = runner.invoke(app, ["validate"])
    assert result.exit_code == 0, result.output
    assert "Configuration valid" in result.output


def test_validate_reports_errors():
    result = runner.invoke(app, ["validate", "--size", "Custom", "--custom-width", "40", "--margin", "60"])
    assert result.exit_code == 1
    assert "Width must be between 50mm and 500mm" in result.output
    assert "Top margin must be between 0mm and 50mm" in result.output


def test_stylesheet_to_stdout():
    result = runner.invoke(app, ["stylesheet", "--size", "A6"])
    assert result.exit_code == 0, result.output
    assert "size: 105mm 148mm;" in result.output
    assert "width: 85.6mm;" in result.output


def test_stylesheet_to_file(tmp_path):
    output = tmp_path / "print.css"
    result = runner.invoke(app, ["stylesheet", "--output", str(output)])
    assert result.exit_code == 0, result.output
    assert "@media print" in output.read_text(encoding="utf-8")


def test_print_sheet_writes_document(tmp_path):
    output = tmp_path / "badges.html"
    result = runner.invoke(app, ["print-sheet", "--badges", "4", "--output", str(output)])
    assert result.exit_code == 0, result.output
    html = output.read_text(encoding="utf-8")
    assert f'<style id="{PRINT_STYLE_ID}">' in html
    assert html.count('class="badge-container"') == 4


def test_print_sheet_without_badges(tmp_path):
    result = runner.invoke(app, ["print-sheet", "--badges", "0", "--output", str(tmp_path / "x.html")])
    assert result.exit_code == 1
    assert not (tmp_path / "x.html").exists()


def test_verify_config():
    result = runner.invoke(app, ["verify-config"])
    assert result.exit_code == 0, result.output
    assert "Found 6 print profiles." in result.output
