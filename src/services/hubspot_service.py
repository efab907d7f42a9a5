"""
HubSpot batch upsert client for contacts.
"""
import logging
import traceback
from typing import Sequence

from hubspot import HubSpot
from hubspot.crm.contacts import (
    ApiException,
    BatchInputSimplePublicObjectBatchInputUpsert,
    SimplePublicObjectBatchInputUpsert,
)

from models.contact import ContactBatch, ContactUpsertItem
from utils.errors import UpsertFailedError

logger = logging.getLogger(__name__)


def build_batch_input(items: Sequence[ContactUpsertItem]) -> BatchInputSimplePublicObjectBatchInputUpsert:
    """Convert upsert items into the request model of the batch upsert endpoint."""
    return BatchInputSimplePublicObjectBatchInputUpsert(
        inputs=[
            SimplePublicObjectBatchInputUpsert(
                id=item.id,
                id_property=item.id_property,
                properties=item.properties
            )
            for item in items
        ]
    )


def upsert_contacts(items: Sequence[ContactUpsertItem], access_token: str):
    """
    Create or update contacts in HubSpot with one batch upsert call.

    All items are sent in a single request; keeping the batch within HubSpot's
    size limit is the caller's responsibility.

    Args:
        items: The contacts to upsert
        access_token: HubSpot private app access token

    Returns:
        The HubSpot batch response

    Raises:
        UpsertFailedError: If there are no items or the HubSpot call fails
    """
    if not items:
        raise UpsertFailedError("No contacts provided for upsert")

    batch = ContactBatch(inputs=list(items))
    logger.info(f"Upserting {len(batch)} contacts to HubSpot")
    logger.debug(f"HubSpot upsert payload: {batch.to_payload()}")

    client = HubSpot(access_token=access_token)
    try:
        response = client.crm.contacts.batch_api.upsert(
            batch_input_simple_public_object_batch_input_upsert=build_batch_input(batch.inputs)
        )
    except ApiException as e:
        logger.error(f"Error during HubSpot upsert: status={e.status}, reason={e.reason}, body={e.body}")
        raise UpsertFailedError(f"HubSpot batch upsert failed with status {e.status}: {e.reason}") from e
    except Exception as e:
        logger.error(f"Error during HubSpot upsert: {str(e)}")
        logger.error(f"Stack trace: {traceback.format_exc()}")
        raise UpsertFailedError(f"HubSpot batch upsert failed: {str(e)}") from e

    logger.info(f"HubSpot upsert response: {response}")
    return response
