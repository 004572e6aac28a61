from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env into os.environ
load_dotenv()


class Settings(BaseSettings):
    """Application configuration settings backed by environment variables."""

    credentials_path: str = Field(
        default="configs/credentials.ini",
        validation_alias="RECORD_BROWSER_CREDENTIALS",
        description="Path to the key=value credential file (host, user, password, dbname)."
    )
    table_name: str = Field(
        default="customers",
        validation_alias="RECORD_BROWSER_TABLE",
        description="Table whose rows are loaded into the browser."
    )
    driver: str = Field(
        default="postgresql+psycopg2",
        validation_alias="RECORD_BROWSER_DRIVER",
        description="SQLAlchemy drivername used to build the connection URL."
    )
    fetch_timeout_sec: float = Field(
        default=30,
        validation_alias="FETCH_TIMEOUT_SEC",
        description="Upper bound for the whole load sequence. 0 disables the bound."
    )
    form_title: str = Field(
        default="Customer Form",
        validation_alias="FORM_TITLE",
        description="Heading shown above the record form."
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def configure_env(self, env: Optional[str]) -> None:
        """Loads environment-specific variables and reloads settings."""
        if not env:
            return

        load_dotenv(f".env.{env}", override=True)
        new_settings = Settings()
        self.__dict__.update(new_settings.__dict__)


settings = Settings()
