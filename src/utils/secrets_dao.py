"""
Secrets Manager Data Access Object for resolving the HubSpot credential.
"""
import json
import logging
from typing import Optional

from botocore.exceptions import ClientError

from utils.aws_clients import get_secrets_client
from utils.config import get_config
from utils.errors import CredentialNotFoundError

# Configure logging
logger = logging.getLogger(__name__)


def get_secret_string(secret_id: str) -> str:
    """
    Fetch the string payload of a secret.

    Args:
        secret_id: Name or ARN of the secret

    Returns:
        The SecretString value

    Raises:
        CredentialNotFoundError: If the secret does not exist or holds no string payload
        ClientError: For any other Secrets Manager failure
    """
    try:
        response = get_secrets_client().get_secret_value(SecretId=secret_id)
    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code')
        if error_code == 'ResourceNotFoundException':
            logger.error(f"Secret '{secret_id}' not found in Secrets Manager")
            raise CredentialNotFoundError(f"Secret '{secret_id}' not found") from e
        logger.error(f"Error retrieving secret '{secret_id}': {str(e)}")
        raise

    secret_string = response.get('SecretString')
    if not secret_string:
        logger.error(f"Secret '{secret_id}' has no string payload")
        raise CredentialNotFoundError("HubSpot access token not found in Secrets Manager")
    return secret_string


def get_hubspot_access_token(secret_id: Optional[str] = None) -> str:
    """
    Resolve the HubSpot private app access token.

    The secret payload must be a JSON object carrying the token under the
    configured field. The token is fetched on every call and never cached.

    Args:
        secret_id: Optional secret name (defaults to the configured HubSpot secret)

    Returns:
        The access token

    Raises:
        CredentialNotFoundError: If the secret is missing, is not a JSON object,
            or does not contain a non-empty token
    """
    config = get_config()
    secret_id = secret_id or config.hubspot_secret_name

    secret_string = get_secret_string(secret_id)
    try:
        payload = json.loads(secret_string)
    except json.JSONDecodeError as e:
        logger.error(f"Secret '{secret_id}' is not valid JSON")
        raise CredentialNotFoundError(f"Secret '{secret_id}' is not valid JSON") from e

    if not isinstance(payload, dict):
        logger.error(f"Secret '{secret_id}' is not a JSON object")
        raise CredentialNotFoundError(f"Secret '{secret_id}' is not a JSON object")

    token = payload.get(config.hubspot_token_field)
    if not token or not isinstance(token, str):
        logger.error(f"Secret '{secret_id}' has no '{config.hubspot_token_field}' field")
        raise CredentialNotFoundError("HubSpot access token not found in Secrets Manager")

    logger.info(f"Resolved HubSpot access token from secret '{secret_id}'")
    return token
