import logging
from collections.abc import Mapping
from typing import Any, cast

import dacite
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud.firestore_v1 import AsyncClient, DocumentSnapshot

from models import Document, EraseStats, OperationResult
from repositories import DocumentRepository

from .connection import FirestoreConnection
from .constants import DEFAULT_BATCH_SIZE
from .util import delete_collection_batched, validate_batch_size

STORE_ERRORS = (GoogleAPIError, GoogleAuthError)


class FirestoreDocumentRepository(DocumentRepository):
    def __init__(self, connection: FirestoreConnection, default_batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        self.connection = connection
        self.default_batch_size = validate_batch_size(default_batch_size)
        self.logger = logging.getLogger(self.__class__.__name__)

    def doc_to_document(self, doc: DocumentSnapshot, collection: str) -> Document:
        return dacite.from_dict(
            data_class=Document,
            data={
                # Only called for snapshots that exist, so to_dict() is never None
                'data': cast(dict[str, Any], doc.to_dict()),
                'id': doc.id,
                'collection': collection,
            },
        )

    def _client_for(self, collection: str, document_id: str) -> AsyncClient:
        client = self.connection.client

        if not collection or not document_id:
            raise ValueError('No collection or document_id was provided.')

        return client

    async def set(self, collection: str, document_id: str, data: Mapping[str, Any]) -> OperationResult[None]:
        client = self._client_for(collection, document_id)

        if not isinstance(data, Mapping):
            raise ValueError('No data mapping was provided.')

        try:
            await client.collection(collection).document(document_id).set(dict(data))
        except STORE_ERRORS as e:
            self.logger.error('Error setting document %s in collection %s: %s', document_id, collection, e)
            return OperationResult.failure(e)

        return OperationResult.success()

    async def get(self, collection: str, document_id: str) -> OperationResult[Document]:
        client = self._client_for(collection, document_id)

        try:
            doc = await client.collection(collection).document(document_id).get()
        except STORE_ERRORS as e:
            self.logger.error('Error getting document %s from collection %s: %s', document_id, collection, e)
            return OperationResult.failure(e)

        if not doc.exists:
            self.logger.debug('Document %s not found in collection %s', document_id, collection)
            return OperationResult.not_found()

        return OperationResult.success(self.doc_to_document(doc, collection))

    async def delete(self, collection: str, document_id: str) -> OperationResult[None]:
        client = self._client_for(collection, document_id)

        try:
            await client.collection(collection).document(document_id).delete()
        except STORE_ERRORS as e:
            self.logger.error('Error deleting document %s from collection %s: %s', document_id, collection, e)
            return OperationResult.failure(e)

        return OperationResult.success()

    async def erase_collection(self, collection: str, batch_size: int | None = None) -> OperationResult[EraseStats]:
        client = self.connection.client

        if not collection:
            raise ValueError('No collection was provided.')

        if batch_size is None:
            batch_size = self.default_batch_size

        try:
            stats = await delete_collection_batched(client, collection, batch_size)
        except STORE_ERRORS as e:
            self.logger.error('Error erasing collection %s: %s', collection, e)
            return OperationResult.failure(e)

        self.logger.info('Erased collection %s: %d documents in %d batches', collection, stats.deleted, stats.batches)
        return OperationResult.success(stats)
