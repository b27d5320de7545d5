# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to target sites, browser session, timeouts and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="PAGESCOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
        frozen=True,
    )

    # Target sites
    leetcode_domain: str = Field(default="https://leetcode.com", description="Base domain for LeetCode links")
    problemset_path: str = Field(default="/problemset/all/", description="Path of the problem set table page")
    wiki_base_url: str = Field(default="https://en.wikipedia.org", description="Base URL for relative wiki paths")

    # Browser session
    browser_endpoint: str = Field(
        default="http://localhost:9222",
        description="CDP endpoint of a running Chromium; empty string launches a local browser instead",
    )
    headless: bool = Field(default=True, description="Run a locally launched browser in headless mode")
    wait_timeout: float = Field(default=30.0, gt=0, description="Seconds to wait for each page-load condition")
    poll_interval: float = Field(default=0.5, gt=0, description="Seconds between wait condition polls")

    # HTTP
    http_timeout: float = Field(default=30.0, gt=0, description="Timeout in seconds for wiki page requests")
    user_agent: str = Field(
        default="pagescout/0.1 (+https://github.com/pagescout/pagescout)",
        description="User-Agent header sent with wiki requests",
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")

    @property
    def problemset_url(self) -> str:
        return f"{self.leetcode_domain}{self.problemset_path}"


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
