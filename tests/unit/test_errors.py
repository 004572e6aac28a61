from recordbrowser.common.errors import (
    ConfigError,
    DatastoreConnectionError,
    ErrorCode,
    FetchError,
    RecordBrowserError,
)


def test_errors_share_base_class():
    assert issubclass(ConfigError, RecordBrowserError)
    assert issubclass(DatastoreConnectionError, RecordBrowserError)
    assert issubclass(FetchError, RecordBrowserError)


def test_error_string_includes_code():
    err = FetchError("relation missing", stage="FETCH_ROWS")

    assert str(err) == "[FETCH_FAILED] relation missing"
    assert err.stage == "FETCH_ROWS"


def test_safe_message_hides_driver_output():
    err = DatastoreConnectionError("could not connect to postgres://alice:pw@db1")

    assert err.error_code == ErrorCode.CONNECTION_FAILED
    assert "pw" not in err.get_safe_message()


def test_config_error_keeps_path():
    err = ConfigError(ErrorCode.CONFIG_NOT_FOUND, "missing", path="/tmp/x.ini")

    assert err.path == "/tmp/x.ini"
