"""
Process-wide boto3 clients.

Clients are created on first use and reused across warm Lambda invocations so
connections are not re-established for every file.
"""
import logging
from functools import lru_cache

import boto3

from utils.config import get_config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_s3_client():
    region = get_config().aws_region
    logger.info(f"Creating S3 client for region {region}")
    return boto3.client('s3', region_name=region)


@lru_cache(maxsize=None)
def get_secrets_client():
    region = get_config().aws_region
    logger.info(f"Creating Secrets Manager client for region {region}")
    return boto3.client('secretsmanager', region_name=region)


def reset_clients() -> None:
    """Drop the cached clients so the next call builds fresh ones."""
    get_s3_client.cache_clear()
    get_secrets_client.cache_clear()
