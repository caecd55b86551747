import asyncio
import logging

from google.cloud.firestore_v1 import AsyncClient
from google.cloud.firestore_v1.field_path import FieldPath

from models import EraseStats
from repositories.errors import InvalidBatchSizeError

from .constants import MAX_BATCH_SIZE

logger = logging.getLogger(__name__)


def validate_batch_size(batch_size: int) -> int:
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or not 1 <= batch_size <= MAX_BATCH_SIZE:
        raise InvalidBatchSizeError(batch_size, MAX_BATCH_SIZE)

    return batch_size


async def delete_collection_batched(client: AsyncClient, collection: str, batch_size: int) -> EraseStats:
    validate_batch_size(batch_size)

    stats = EraseStats(collection=collection)
    query = client.collection(collection).order_by(FieldPath.document_id()).limit(batch_size)

    while True:
        # Deleted documents drop out of the ordering, so the same query always returns the next page
        docs = await query.get()

        if len(docs) == 0:
            return stats

        batch = client.batch()
        for doc in docs:
            batch.delete(doc.reference)
        await batch.commit()

        stats.batches += 1
        stats.deleted += len(docs)
        logger.debug('Deleted batch %d (%d documents) from collection %s', stats.batches, len(docs), collection)

        await asyncio.sleep(0)
