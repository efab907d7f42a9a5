"""
Reads a contact export from S3 into raw records.
"""
import logging
from typing import List

from models.contact import RawRecord
from utils.csv_parser import parse_csv_records
from utils.s3_dao import get_object_body

logger = logging.getLogger(__name__)


def read_contacts_from_s3(bucket: str, key: str) -> List[RawRecord]:
    """
    Read a CSV file from S3 and parse it into records.

    Args:
        bucket: The S3 bucket holding the export
        key: The S3 key of the export

    Returns:
        The parsed records, fully materialized

    Raises:
        ObjectNotFoundError: If the file cannot be read
        MalformedTabularDataError: If the file is not well-formed CSV
    """
    content = get_object_body(bucket, key)
    logger.info(f"Bucket={bucket}, Key={key} | Read {len(content)} bytes from S3")

    records = parse_csv_records(content)
    logger.info(f"Bucket={bucket}, Key={key} | Parsed {len(records)} records")
    return records
