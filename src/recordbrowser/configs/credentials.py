"""Credential file parsing.

The credential file is plain text with one ``key = value`` pair per line::

    [postgresql]
    host = db1
    user = alice
    password = secret
    dbname = crm

Section headers and blank lines are skipped, as are lines without ``=``.
Values are everything after the first ``=``, trimmed; there are no quoting
or escaping rules.
"""
import pathlib
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.engine import URL

from recordbrowser.common.errors import ConfigError, ErrorCode
from recordbrowser.common.logger import get_logger

logger = get_logger(__name__)

DEFAULT_HOST = "localhost"

# credential file key -> descriptor field
KNOWN_KEYS = {
    "host": "host",
    "user": "user",
    "password": "password",
    "dbname": "database",
}


class ConnectionDescriptor(BaseModel):
    """Resolved connection parameters for a single database."""

    host: str = DEFAULT_HOST
    user: str = ""
    password: str = Field(default="", repr=False)
    database: str = ""

    model_config = ConfigDict(extra="ignore", frozen=True)

    def to_url(self, driver: str) -> URL:
        """Builds a SQLAlchemy URL for ``driver`` (e.g. ``postgresql+psycopg2``)."""
        return URL.create(
            drivername=driver,
            username=self.user or None,
            password=self.password or None,
            host=self.host or None,
            database=self.database or None,
        )

    def masked(self) -> Dict[str, str]:
        """Returns the fields with the password hidden, for display and logs."""
        return {
            "host": self.host,
            "user": self.user,
            "password": "****" if self.password else "",
            "database": self.database,
        }


def parse_lines(lines) -> Dict[str, str]:
    """Collects ``key=value`` pairs from an iterable of lines.

    Later occurrences of a key overwrite earlier ones.
    """
    values: Dict[str, str] = {}
    for lineno, line in enumerate(lines, start=1):
        if line.startswith("[") or not line.strip():
            continue
        key, sep, value = line.partition("=")
        if not sep:
            logger.debug(f"Skipping line {lineno} without '=' in credential file")
            continue
        values[key.strip()] = value.strip()
    return values


def resolve(path: Union[str, pathlib.Path]) -> ConnectionDescriptor:
    """Reads a credential file into a ConnectionDescriptor.

    Args:
        path: Location of the credential file. ``~`` is expanded.

    Returns:
        ConnectionDescriptor: Descriptor with defaults applied for absent keys.

    Raises:
        ConfigError: CONFIG_NOT_FOUND if the file does not exist,
            CONFIG_UNREADABLE if it cannot be read.
    """
    target_path = pathlib.Path(path).expanduser()

    if not target_path.exists():
        raise ConfigError(
            ErrorCode.CONFIG_NOT_FOUND,
            f"Credential file not found: {target_path}",
            path=str(target_path),
        )

    try:
        with open(target_path, "r", encoding="utf-8") as fh:
            raw = parse_lines(fh)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            ErrorCode.CONFIG_UNREADABLE,
            f"Failed to read credential file {target_path}: {e}",
            path=str(target_path),
        ) from e

    fields = {KNOWN_KEYS[key]: value for key, value in raw.items() if key in KNOWN_KEYS}
    descriptor = ConnectionDescriptor(**fields)
    logger.info(f"Resolved credentials from {target_path} for host '{descriptor.host}'")
    return descriptor
