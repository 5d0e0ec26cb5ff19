"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

WEB_BIND_ADDR_KEY = "WEB_BIND_ADDR"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        web_bind_addr: ``host:port`` the server listens on (env WEB_BIND_ADDR).
        docs_enabled: Serve the OpenAPI document and Swagger UI.
        rate_limit_enabled: Enforce rate limits on incoming requests.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Todo Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    web_bind_addr: str = "127.0.0.1:8080"
    docs_enabled: bool = True
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    def _split_bind_addr(self) -> tuple[str, int]:
        host, sep, port = self.web_bind_addr.rpartition(":")
        if not sep or not host:
            raise ValueError(
                f"{WEB_BIND_ADDR_KEY} must look like host:port, got {self.web_bind_addr!r}"
            )
        if not port.isdigit():
            raise ValueError(f"Invalid port in {WEB_BIND_ADDR_KEY}: {port!r}")
        return host, int(port)

    @property
    def bind_host(self) -> str:
        """Host part of ``web_bind_addr``."""
        return self._split_bind_addr()[0]

    @property
    def bind_port(self) -> int:
        """Port part of ``web_bind_addr``."""
        return self._split_bind_addr()[1]


settings = Settings()
