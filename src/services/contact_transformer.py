"""
Turns raw CSV records into HubSpot contact upsert items.
"""
from typing import List, Sequence

from models.contact import ContactUpsertItem, EMAIL_ID_PROPERTY, RawRecord

INTERNAL_FIELD_PREFIX = "_"


def to_upsert_item(record: RawRecord) -> ContactUpsertItem:
    """
    Build an upsert item from one record.

    Fields whose name starts with an underscore are internal to the export and
    are not sent to HubSpot. A record without an email column is passed
    through with no id.
    """
    properties = {
        name: value
        for name, value in record.items()
        if not name.startswith(INTERNAL_FIELD_PREFIX)
    }
    return ContactUpsertItem(
        id=properties.get(EMAIL_ID_PROPERTY),
        id_property=EMAIL_ID_PROPERTY,
        properties=properties
    )


def transform_records(records: Sequence[RawRecord]) -> List[ContactUpsertItem]:
    """Transform records into upsert items, preserving order."""
    return [to_upsert_item(record) for record in records]
