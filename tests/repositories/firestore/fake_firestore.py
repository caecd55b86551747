from copy import deepcopy
from typing import Any


class FakeSnapshot:
    def __init__(self, reference: 'FakeDocumentReference', data: dict[str, Any] | None) -> None:
        self.reference = reference
        self.id = reference.id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> dict[str, Any] | None:
        return deepcopy(self._data)


class FakeDocumentReference:
    def __init__(self, client: 'FakeAsyncClient', collection: str, document_id: str) -> None:
        self.client = client
        self.collection = collection
        self.id = document_id

    async def get(self) -> FakeSnapshot:
        self.client.check('get')
        return FakeSnapshot(self, self.client.data.get(self.collection, {}).get(self.id))

    async def set(self, data: dict[str, Any]) -> None:
        self.client.check('set')
        self.client.data.setdefault(self.collection, {})[self.id] = deepcopy(data)

    async def delete(self) -> None:
        self.client.check('delete')
        self.client.data.get(self.collection, {}).pop(self.id, None)


class FakeQuery:
    def __init__(self, client: 'FakeAsyncClient', collection: str, order_by: str | None = None, limit: int | None = None) -> None:
        self.client = client
        self.collection = collection
        self._order_by = order_by
        self._limit = limit

    def order_by(self, field: str) -> 'FakeQuery':
        return FakeQuery(self.client, self.collection, field, self._limit)

    def limit(self, count: int) -> 'FakeQuery':
        return FakeQuery(self.client, self.collection, self._order_by, count)

    async def get(self) -> list[FakeSnapshot]:
        self.client.check('query')
        self.client.queries.append(self.collection)

        docs = self.client.data.get(self.collection, {})
        ids = sorted(docs) if self._order_by == '__name__' else list(docs)
        if self._limit is not None:
            ids = ids[: self._limit]

        return [FakeSnapshot(FakeDocumentReference(self.client, self.collection, i), docs[i]) for i in ids]


class FakeCollection(FakeQuery):
    def document(self, document_id: str) -> FakeDocumentReference:
        return FakeDocumentReference(self.client, self.collection, document_id)


class FakeWriteBatch:
    def __init__(self, client: 'FakeAsyncClient') -> None:
        self.client = client
        self.refs: list[FakeDocumentReference] = []

    def delete(self, reference: FakeDocumentReference) -> None:
        self.refs.append(reference)

    async def commit(self) -> None:
        self.client.check('commit')
        for ref in self.refs:
            self.client.data.get(ref.collection, {}).pop(ref.id, None)
        self.client.commits.append(len(self.refs))


class FakeAsyncClient:
    """In-memory stand-in for the subset of the async Firestore client used by the repositories."""

    def __init__(self, project: str = 'fake-project') -> None:
        self.project = project
        self.data: dict[str, dict[str, dict[str, Any]]] = {}
        self.queries: list[str] = []
        self.commits: list[int] = []
        self.failures: dict[str, Exception] = {}
        self.fail_after: dict[str, int] = {}

    def check(self, operation: str) -> None:
        if operation not in self.failures:
            return

        remaining = self.fail_after.get(operation, 0)
        if remaining > 0:
            self.fail_after[operation] = remaining - 1
            return

        raise self.failures[operation]

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)

    def batch(self) -> FakeWriteBatch:
        return FakeWriteBatch(self)

    def seed(self, collection: str, count: int) -> list[str]:
        ids = [f'doc-{i:04d}' for i in range(count)]
        for i, document_id in enumerate(ids):
            self.data.setdefault(collection, {})[document_id] = {'index': i}
        return ids
