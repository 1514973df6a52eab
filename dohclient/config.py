"""Configuration module for the DoH client.

Reads configuration from environment variables with validation.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dohclient.models import Provider, RecordType
from dohclient.models.record_type import RecordTypeLike


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Provider selection
    provider_name: str = "google"
    custom_url: Optional[str] = None

    # Transport
    timeout: float = 10.0

    # CLI defaults
    record_type: RecordTypeLike = RecordType.A
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Optional environment variables:
        - DOH_PROVIDER: google, cloudflare or an endpoint URL (default: google)
        - DOH_URL: Custom endpoint URL, overrides DOH_PROVIDER
        - DOH_TIMEOUT: Transport timeout in seconds (default: 10)
        - DOH_TYPE: Default record type for the CLI (default: A)
        - DEBUG: Enable debug logging (default: false)

        Returns:
            Config: Configuration object

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        provider_name = os.environ.get("DOH_PROVIDER", "google")
        custom_url = os.environ.get("DOH_URL") or None

        errors = []
        if custom_url is None:
            try:
                Provider.from_name(provider_name)
            except ValueError:
                errors.append(f"DOH_PROVIDER: unknown provider {provider_name!r}")

        timeout_str = os.environ.get("DOH_TIMEOUT", "10")
        timeout = 0.0
        try:
            timeout = float(timeout_str)
        except ValueError:
            pass
        if not timeout > 0:
            errors.append(f"DOH_TIMEOUT: expected a positive number, got {timeout_str!r}")

        record_type = RecordType.A
        type_str = os.environ.get("DOH_TYPE")
        if type_str:
            try:
                record_type = RecordType.parse(type_str)
            except ValueError:
                errors.append(f"DOH_TYPE: unknown record type {type_str!r}")

        if errors:
            raise ConfigurationError(
                f"Invalid environment variables: {'; '.join(errors)}"
            )

        return cls(
            provider_name=provider_name,
            custom_url=custom_url,
            timeout=timeout,
            record_type=record_type,
            debug=os.environ.get("DEBUG", "").lower() in ("true", "1", "yes"),
        )

    def provider(self) -> Provider:
        """Return the configured provider.

        Raises:
            ConfigurationError: If provider_name is not a known provider
        """
        if self.custom_url:
            return Provider.custom(self.custom_url)
        try:
            return Provider.from_name(self.provider_name)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
