"""
Contact sync configuration settings.

The deployment region is the only value read from the environment that the
pipeline cannot run without. The secret name and the token field inside it
are fixed for every deployment.
"""
import logging
import os
from dataclasses import dataclass

from utils.errors import ConfigurationError

HUBSPOT_SECRET_NAME = "hubspot-secret-name"
HUBSPOT_TOKEN_FIELD = "hubspotAccessToken"


@dataclass(frozen=True)
class SyncConfig:
    """Configuration for a single contact sync invocation."""

    aws_region: str
    hubspot_secret_name: str = HUBSPOT_SECRET_NAME
    hubspot_token_field: str = HUBSPOT_TOKEN_FIELD
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> 'SyncConfig':
        """
        Create configuration from environment variables.

        Environment variables:
        - AWS_REGION (required)
        - LOG_LEVEL (default INFO)

        Raises:
            ConfigurationError: If AWS_REGION is not set

        An unknown LOG_LEVEL falls back to INFO.
        """
        aws_region = os.getenv('AWS_REGION')
        if not aws_region:
            raise ConfigurationError("AWS_REGION environment variable is required")

        return cls(
            aws_region=aws_region,
            log_level=_log_level(os.getenv('LOG_LEVEL', 'INFO'))
        )


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return 'INFO'


def get_config() -> SyncConfig:
    """Build the configuration from the current environment."""
    return SyncConfig.from_environment()
