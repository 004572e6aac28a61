import pytest
from unittest.mock import patch
from typer.testing import CliRunner

from recordbrowser.cli.main import app
from recordbrowser.common.errors import FetchError
from recordbrowser.common.settings import settings
from recordbrowser.records.store import RecordStore
from recordbrowser.session import BrowserSession

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_settings(monkeypatch):
    """The CLI callback writes overrides into the global settings object."""
    for name in ("credentials_path", "table_name", "driver", "form_title"):
        monkeypatch.setattr(settings, name, getattr(settings, name))


def test_check_config_prints_masked_descriptor(credentials_file):
    path = credentials_file("host=db1\nuser=alice\npassword=s3cret\n")

    result = runner.invoke(app, ["--credentials", str(path), "check-config"])

    assert result.exit_code == 0
    assert "db1" in result.output
    assert "alice" in result.output
    assert "s3cret" not in result.output


def test_check_config_missing_file_exits_with_error(tmp_path):
    result = runner.invoke(app, ["--credentials", str(tmp_path / "missing.ini"), "check-config"])

    assert result.exit_code == 1
    assert "CONFIG_NOT_FOUND" in result.output


def test_browse_steps_through_records(customer_store):
    # Arrange
    session = BrowserSession(customer_store, table_name="customers")

    # Act
    with patch("recordbrowser.cli.main.BrowserSession.open", return_value=session):
        result = runner.invoke(app, ["--table", "customers", "browse"], input="n\nn\nq\n")

    # Assert
    assert result.exit_code == 0, result.output
    assert "Ann" in result.output
    assert "Bo" in result.output
    assert "2/2" in result.output


def test_browse_accepts_scratch_edit(customer_store):
    session = BrowserSession(customer_store)

    with patch("recordbrowser.cli.main.BrowserSession.open", return_value=session):
        result = runner.invoke(app, ["browse"], input='e name "Ann Marie"\nq\n')

    assert result.exit_code == 0, result.output
    assert "Ann Marie" in result.output


def test_browse_reports_unknown_field(customer_store):
    session = BrowserSession(customer_store)

    with patch("recordbrowser.cli.main.BrowserSession.open", return_value=session):
        result = runner.invoke(app, ["browse"], input="e email x\nq\n")

    assert result.exit_code == 0
    assert "No field named 'email'" in result.output


def test_browse_with_empty_table_shows_empty_state():
    session = BrowserSession(RecordStore())

    with patch("recordbrowser.cli.main.BrowserSession.open", return_value=session):
        result = runner.invoke(app, ["browse"], input="n\np\nq\n")

    assert result.exit_code == 0
    assert "No records to display." in result.output


def test_dump_prints_all_records(customer_store):
    session = BrowserSession(customer_store)

    with patch("recordbrowser.cli.main.BrowserSession.open", return_value=session):
        result = runner.invoke(app, ["dump"])

    assert result.exit_code == 0
    assert "Ann" in result.output
    assert "Bo" in result.output
    assert "2 records" in result.output


def test_startup_failure_exits_with_error():
    with patch(
        "recordbrowser.cli.main.BrowserSession.open",
        side_effect=FetchError("relation does not exist", stage="FETCH_ROWS"),
    ):
        result = runner.invoke(app, ["dump"])

    assert result.exit_code == 1
    assert "FETCH_FAILED" in result.output


def test_startup_failure_names_the_failed_stage():
    with patch(
        "recordbrowser.cli.main.BrowserSession.open",
        side_effect=FetchError("relation does not exist", stage="FETCH_ROWS"),
    ):
        result = runner.invoke(app, ["dump"])

    assert result.exit_code == 1
    assert "stage: FETCH_ROWS" in result.output
