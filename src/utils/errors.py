"""
Exceptions raised by the contact sync pipeline.

Each exception is logged where it is raised and propagated unchanged up to the
Lambda handler, which logs it again and re-raises so the invocation is marked
as failed.
"""


class ContactSyncError(Exception):
    """Base class for all contact sync failures."""
    pass


class ConfigurationError(ContactSyncError):
    """Raised when a required environment setting is missing."""
    pass


class InvalidEventError(ContactSyncError):
    """Raised when the trigger event is missing records, bucket or key."""
    pass


class ObjectNotFoundError(ContactSyncError):
    """Raised when the source file cannot be read from S3."""
    pass


class MalformedTabularDataError(ContactSyncError):
    """Raised when the source file is not well-formed CSV."""
    pass


class CredentialNotFoundError(ContactSyncError):
    """Raised when the HubSpot access token cannot be resolved."""
    pass


class UpsertFailedError(ContactSyncError):
    """Raised when the HubSpot batch upsert call fails."""
    pass
