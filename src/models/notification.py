"""
Models for the SNS notification that triggers a contact sync.
"""
from pydantic import BaseModel, ConfigDict, Field


class FileLocation(BaseModel):
    """Where the newly uploaded export lives in S3."""
    bucket: str = Field(min_length=1)
    key: str = Field(min_length=1)

    model_config = ConfigDict(extra='ignore', frozen=True)

    def log_prefix(self) -> str:
        return f"Bucket={self.bucket}, Key={self.key}"
