"""Runtime configuration — API key and base URL from the environment.

A `.env` file in the working directory is loaded first; variables already
set in the environment take precedence.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.apollo.io/api/v1"


class ConfigError(ValueError):
    """Required configuration is missing."""


class ApolloConfig(BaseModel):
    """Credentials and endpoint for the Apollo API. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_config(environ: Optional[Mapping[str, str]] = None) -> ApolloConfig:
    """Build the configuration from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ`` after
                 loading ``.env``.

    Raises:
        ConfigError: APOLLO_API_KEY is not set.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = environ.get("APOLLO_API_KEY", "")
    if not api_key:
        raise ConfigError(
            "APOLLO_API_KEY environment variable is required. "
            "Set it in a .env file or export APOLLO_API_KEY=your_key_here"
        )

    base_url = environ.get("APOLLO_BASE_URL", "") or DEFAULT_BASE_URL
    if base_url != DEFAULT_BASE_URL:
        logger.info("Using Apollo base URL override: %s", base_url)
    return ApolloConfig(api_key=api_key, base_url=base_url)


def configure_logging(default_level: str) -> None:
    """Configure root logging on stderr, honouring APOLLO_LOG_LEVEL."""
    level = os.environ.get("APOLLO_LOG_LEVEL", default_level).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
