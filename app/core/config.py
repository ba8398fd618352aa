"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Base path under which every route is mounted.
        database_url: SQLAlchemy URL of the person database.
        database_echo: Echo SQL statements to the log.
        default_page_limit: Page size of GET /persons when none is given.
        max_page_limit: Largest page size a client may request.
        max_upload_size_bytes: Maximum accepted size of an import file.
        rate_limit_enabled: Toggle request rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for the CSV import endpoint.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "PersonService"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/person-service"

    database_url: str = "sqlite:///./persons.db"
    database_echo: bool = False

    default_page_limit: int = 20
    max_page_limit: int = 100
    max_upload_size_bytes: int = 1_048_576  # 1 MB

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"


settings = Settings()
