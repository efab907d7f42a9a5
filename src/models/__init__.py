"""
Models package for the HubSpot contact sync.
"""

from .contact import (
    ContactBatch,
    ContactUpsertItem,
    RawRecord,
    EMAIL_ID_PROPERTY,
)

from .notification import FileLocation
