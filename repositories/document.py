from collections.abc import Mapping
from typing import Any

from models import Document, EraseStats, OperationResult


class DocumentRepository:
    async def set(self, collection: str, document_id: str, data: Mapping[str, Any]) -> OperationResult[None]:
        raise NotImplementedError  # pragma: no cover

    async def get(self, collection: str, document_id: str) -> OperationResult[Document]:
        raise NotImplementedError  # pragma: no cover

    async def delete(self, collection: str, document_id: str) -> OperationResult[None]:
        raise NotImplementedError  # pragma: no cover

    async def erase_collection(self, collection: str, batch_size: int | None = None) -> OperationResult[EraseStats]:
        raise NotImplementedError  # pragma: no cover
