"""
Contact Sync Handler for CSV Exports

This Lambda handler is triggered by an SNS notification naming a newly
uploaded CSV export in S3. It reads the file, converts each row into a HubSpot
contact and upserts all contacts with a single batch call.
"""
import json
import logging
import os
import sys
import traceback
from typing import Dict, Any, Optional

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Fix imports for Lambda environment
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

# Import after path fixing
from services.contact_file_reader import read_contacts_from_s3
from services.contact_transformer import transform_records
from services.hubspot_service import upsert_contacts
from utils.config import get_config
from utils.lambda_utils import extract_file_location
from utils.secrets_dao import get_hubspot_access_token


def handler(event: Optional[Dict[str, Any]], context: Any) -> Dict[str, Any]:
    """
    Sync the contacts of one uploaded CSV export into HubSpot.

    Args:
        event: SNS notification whose first record carries the bucket and key
        context: Lambda context

    Returns:
        Dict summarising the invocation

    Raises:
        Any error from validation, extraction, credential resolution or the
        upsert, after logging it, so the runtime records a failed invocation
    """
    try:
        location = extract_file_location(event)

        config = get_config()
        logger.setLevel(config.log_level)
        prefix = location.log_prefix()
        logger.info(f"{prefix} | Processing CSV file...")

        records = read_contacts_from_s3(location.bucket, location.key)
        if not records:
            logger.info(f"{prefix} | No valid contacts to process for upsert to hubspot")
            return _summary(location.bucket, location.key, 'skipped', 0)

        contacts = transform_records(records)
        if not contacts:
            logger.info(f"{prefix} | No valid contacts to upsert")
            return _summary(location.bucket, location.key, 'skipped', 0)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{prefix} | Payload contacts: {json.dumps([c.to_payload() for c in contacts])}")

        access_token = get_hubspot_access_token(config.hubspot_secret_name)
        upsert_contacts(contacts, access_token)

        logger.info(f"{prefix} | Lambda execution completed successfully with upsert of {len(contacts)} contacts")
        return _summary(location.bucket, location.key, 'completed', len(contacts))

    except Exception as e:
        logger.error(f"Error in Lambda execution: {str(e)}")
        logger.error(f"Stack trace: {traceback.format_exc()}")
        raise


def _summary(bucket: str, key: str, status: str, upserted: int) -> Dict[str, Any]:
    return {
        'status': status,
        'bucket': bucket,
        'key': key,
        'upserted': upserted
    }
