# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti, Manav Gupta

Tag Validator Configuration.
This module defines configuration settings for the Tag Validator using Pydantic.
It loads configuration from environment variables (prefixed with ``TAGVALIDATOR_``)
with sensible defaults.

Environment variables:
- TAGVALIDATOR_LOG_LEVEL: Logging level (default: "INFO")
- TAGVALIDATOR_RULES_CATALOG_PATH: Path to a rule catalog YAML file (default: packaged catalog)
- TAGVALIDATOR_PHONE_NUMBER_DIGITS: Digits required in a phone number (default: 10)
- TAGVALIDATOR_ALLOWED_URL_SCHEMES: URL schemes accepted as valid (default: ["http", "https"])
- TAGVALIDATOR_MAX_URL_LENGTH: Maximum URL length (default: 2048)
- TAGVALIDATOR_STRICT_REFERENCE_CODES: Report un-negotiated reference codes as errors (default: True)

Examples:
    >>> from tagvalidator.config import Settings
    >>> s = Settings(log_level='debug')
    >>> s.validate_log_level()  # no error
    >>> s.log_level
    'DEBUG'
    >>> s2 = Settings(allowed_url_schemes='https, http')
    >>> s2.allowed_url_schemes
    ['https', 'http']
"""

# Standard
from functools import lru_cache
import json
import logging
from pathlib import Path
from typing import Annotated, List, Optional

# Third-Party
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Only configure basic logging if no handlers exist yet
# This prevents conflicts with LoggingService while ensuring config logging works
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Tag Validator configuration settings.

    Examples:
        >>> from tagvalidator.config import Settings
        >>> s = Settings()
        >>> s.phone_number_digits
        10
        >>> s.strict_reference_codes
        True
        >>> s.rules_catalog_path is None
        True
        >>> Settings(log_level='verbose').log_level
        'VERBOSE'
    """

    # Logging
    log_level: str = "INFO"

    # Rule catalog
    rules_catalog_path: Optional[Path] = Field(default=None, description="Rule catalog YAML file; the packaged catalog is used when unset")

    # Format predicates
    phone_number_digits: int = Field(default=10, description="Number of digits a valid phone number must carry")
    allowed_url_schemes: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["http", "https"], description="URL schemes accepted as valid (CSV or JSON list)")
    max_url_length: int = 2048

    # Cross-reference validation
    strict_reference_codes: bool = Field(default=True, description="Report item codes absent from the reference definitions as errors instead of warnings")

    model_config = SettingsConfigDict(env_prefix="TAGVALIDATOR_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        """Upper-case the configured log level.

        Args:
            v: Raw log level value.

        Returns:
            str: Upper-cased log level.
        """
        return str(v).strip().upper()

    @field_validator("allowed_url_schemes", mode="before")
    @classmethod
    def _parse_list_from_env(cls, v):  # type: ignore[override]
        """Parse list fields from environment values.

        Accepts either JSON arrays (e.g. '["a","b"]') or comma-separated
        strings (e.g. 'a,b'). Empty or None becomes an empty list.

        Args:
            v: The value to parse, can be None, list, or string.

        Returns:
            list: Parsed list of values, lower-cased.

        Examples:
            >>> Settings._parse_list_from_env('["HTTPS"]')
            ['https']
            >>> Settings._parse_list_from_env(None)
            []
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item).strip().lower() for item in v]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                    return [str(item).strip().lower() for item in parsed] if isinstance(parsed, list) else []
                except json.JSONDecodeError:
                    logger.warning("Invalid JSON list in env for list field; falling back to CSV parsing")
            # CSV fallback
            return [item.strip().lower() for item in s.split(",") if item.strip()]
        return v

    def validate_log_level(self) -> None:
        """
        Validate the configured log level.

        Raises:
            ValueError: If the log level is not a standard logging level.

        Examples:
            >>> Settings(log_level='warning').validate_log_level()
            >>> try:
            ...     Settings(log_level='loud').validate_log_level()
            ... except ValueError:
            ...     print('error')
            error
        """
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}. Must be one of {', '.join(VALID_LOG_LEVELS)}")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: A cached instance of the Settings class.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, Settings)
        True
        >>> # Second call returns the same cached instance
        >>> settings2 = get_settings()
        >>> settings is settings2
        True
    """
    # Instantiate a fresh Pydantic Settings object,
    # loading from env vars or .env exactly once.
    cfg = Settings()
    # Will raise if mis-configured.
    cfg.validate_log_level()
    return cfg


# Create settings instance
settings = get_settings()
