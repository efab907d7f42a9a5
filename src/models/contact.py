"""
Contact models for the HubSpot batch upsert.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# One parsed CSV row. Field sets vary between exports so there is no fixed schema.
RawRecord = Dict[str, str]

EMAIL_ID_PROPERTY = "email"


class ContactUpsertItem(BaseModel):
    """A single contact in HubSpot's batch upsert format."""
    id: Optional[str] = None
    id_property: str = Field(default=EMAIL_ID_PROPERTY, alias="idProperty")
    properties: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(
        populate_by_name=True,
        extra='forbid'
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the camelCase shape HubSpot expects."""
        return self.model_dump(by_alias=True)


class ContactBatch(BaseModel):
    """The request body for a batch upsert call."""
    inputs: List[ContactUpsertItem]

    model_config = ConfigDict(extra='forbid')

    def to_payload(self) -> Dict[str, Any]:
        return {"inputs": [item.to_payload() for item in self.inputs]}

    def __len__(self) -> int:
        return len(self.inputs)
