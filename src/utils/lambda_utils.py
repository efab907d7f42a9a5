"""
Helpers for reading the SNS notification delivered to the Lambda handler.
"""
import json
import logging
from typing import Dict, Any, Optional

from pydantic import ValidationError

from models.notification import FileLocation
from utils.errors import InvalidEventError

logger = logging.getLogger(__name__)


def get_first_record(event: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Return the first record of the event.

    Only the first record is processed; any others are ignored.

    Raises:
        InvalidEventError: If the event is missing or has no records
    """
    if not event or not isinstance(event, dict):
        raise InvalidEventError("No SNS records found in event")

    records = event.get('Records')
    if not records or not isinstance(records, list):
        raise InvalidEventError("No SNS records found in event")

    if len(records) > 1:
        logger.warning(f"Event contains {len(records)} records; only the first is processed")
    return records[0]


def get_sns_message(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract the message of an SNS record.

    SNS delivers the message as a JSON string; an already decoded object is
    accepted as well.

    Raises:
        InvalidEventError: If the message is missing or not a JSON object
    """
    if not isinstance(record, dict):
        raise InvalidEventError("SNS record is not an object")

    sns = record.get('Sns')
    if not isinstance(sns, dict):
        raise InvalidEventError("SNS record has no Sns object")

    message = sns.get('Message')
    if isinstance(message, str):
        try:
            message = json.loads(message)
        except json.JSONDecodeError as e:
            raise InvalidEventError(f"SNS message is not valid JSON: {str(e)}") from e

    if not isinstance(message, dict):
        raise InvalidEventError("S3 bucket or key not provided in SNS message")
    return message


def extract_file_location(event: Optional[Dict[str, Any]]) -> FileLocation:
    """
    Read the bucket and key of the uploaded file from the first SNS record.

    Raises:
        InvalidEventError: If the event has no records, or the message has no
            bucket or key
    """
    message = get_sns_message(get_first_record(event))

    if not message.get('bucket') or not message.get('key'):
        raise InvalidEventError("S3 bucket or key not provided in SNS message")

    try:
        return FileLocation(bucket=message['bucket'], key=message['key'])
    except ValidationError as e:
        raise InvalidEventError(f"Invalid bucket or key in SNS message: {str(e)}") from e
