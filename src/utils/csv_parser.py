"""
CSV parsing for contact exports.

The first row is the header and names the fields of every following row.
"""
import csv
import io
import logging
from typing import List

from models.contact import RawRecord
from utils.errors import MalformedTabularDataError

logger = logging.getLogger(__name__)


def decode_csv_content(content: bytes) -> str:
    """Decode the raw file bytes, dropping a UTF-8 byte order mark if present."""
    try:
        return content.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        logger.error(f"CSV content is not valid UTF-8: {str(e)}")
        raise MalformedTabularDataError(f"CSV content is not valid UTF-8: {str(e)}") from e


def parse_csv_records(content: bytes) -> List[RawRecord]:
    """
    Parse CSV bytes into a list of records keyed by the header row.

    Blank lines are skipped. Every other row must have exactly as many fields
    as the header.

    Args:
        content: The raw CSV file content

    Returns:
        List of records in file order; empty for an empty or header-only file

    Raises:
        MalformedTabularDataError: On broken quoting, a row whose field count
            differs from the header, or content that is not UTF-8
    """
    text_content = decode_csv_content(content)
    reader = csv.reader(io.StringIO(text_content, newline=''), strict=True)

    records: List[RawRecord] = []
    try:
        header = next(reader, None)
        if not header:
            logger.info("CSV content has no header row")
            return records

        for row in reader:
            if not row:
                continue
            if len(row) != len(header):
                message = (
                    f"Invalid record length: header has {len(header)} columns, "
                    f"got {len(row)} on line {reader.line_num}"
                )
                logger.error(message)
                raise MalformedTabularDataError(message)
            records.append(dict(zip(header, row)))
    except csv.Error as e:
        logger.error(f"Error parsing CSV content on line {reader.line_num}: {str(e)}")
        raise MalformedTabularDataError(
            f"Error parsing CSV content on line {reader.line_num}: {str(e)}"
        ) from e

    return records
