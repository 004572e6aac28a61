from functools import wraps
import sys
import traceback

from recordbrowser.common.errors import ConfigError, FetchError, RecordBrowserError
from .console import console, print_error


def _describe(error: RecordBrowserError) -> str:
    detail = str(error)
    if isinstance(error, FetchError) and error.stage:
        detail += f" (stage: {error.stage})"
    elif isinstance(error, ConfigError) and error.path:
        detail += f" (file: {error.path})"
    return detail


def handle_cli_errors(func):
    """Turns startup failures into a one-line message and a non-zero exit.

    A RecordBrowserError exits with 1 and names its code plus the load
    stage or credential file involved. Ctrl-C exits with 130. Anything else
    is a bug and gets its traceback printed.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RecordBrowserError as e:
            print_error(_describe(e))
            sys.exit(1)
        except KeyboardInterrupt:
            console.print("\n[warning]Browsing cancelled.[/warning]")
            sys.exit(130)
        except Exception as e:
            print_error(f"Unexpected error: {e}")
            console.print(traceback.format_exc(), markup=False, highlight=False)
            sys.exit(1)

    return wrapper
