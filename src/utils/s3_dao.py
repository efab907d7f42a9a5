"""
S3 Data Access Object for reading uploaded contact exports.
"""
import logging
from typing import Dict, Any

from botocore.exceptions import ClientError

from utils.aws_clients import get_s3_client
from utils.errors import ObjectNotFoundError

# Configure logging
logger = logging.getLogger(__name__)

MISSING_OBJECT_ERROR_CODES = {'NoSuchKey', 'NoSuchBucket', '404', 'NotFound'}


def get_object(bucket: str, key: str) -> Dict[str, Any]:
    """
    Get an object from S3.

    Args:
        bucket: The S3 bucket name
        key: The S3 key of the object to retrieve

    Returns:
        The S3 GetObject response

    Raises:
        ObjectNotFoundError: If the bucket or key does not exist
        ClientError: For any other S3 failure
    """
    try:
        return get_s3_client().get_object(Bucket=bucket, Key=key)
    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code')
        if error_code in MISSING_OBJECT_ERROR_CODES:
            logger.error(f"Object s3://{bucket}/{key} not found: {str(e)}")
            raise ObjectNotFoundError(
                f"Unable to read CSV file '{key}' from S3 bucket '{bucket}'."
            ) from e
        logger.error(f"Error getting object from S3: {str(e)}")
        raise


def get_object_body(bucket: str, key: str) -> bytes:
    """
    Get the full content of an S3 object.

    The body is read completely into memory; contact exports are small enough
    for this and every downstream step needs the whole file.

    Args:
        bucket: The S3 bucket name
        key: The S3 key of the object

    Returns:
        The object content as bytes

    Raises:
        ObjectNotFoundError: If the object is missing or has no readable body
    """
    response = get_object(bucket, key)
    body = response.get('Body')
    if body is None or not hasattr(body, 'read'):
        logger.error(f"S3 response for s3://{bucket}/{key} has no readable body")
        raise ObjectNotFoundError(
            f"Unable to read CSV file '{key}' from S3 bucket '{bucket}'."
        )
    try:
        return body.read()
    finally:
        body.close()
