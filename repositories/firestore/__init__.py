from .connection import FirestoreConnection, load_credentials
from .constants import DEFAULT_BATCH_SIZE, DEFAULT_DATABASE, MAX_BATCH_SIZE
from .document import FirestoreDocumentRepository
from .util import delete_collection_batched, validate_batch_size

__all__ = [
    'DEFAULT_BATCH_SIZE',
    'DEFAULT_DATABASE',
    'MAX_BATCH_SIZE',
    'FirestoreConnection',
    'FirestoreDocumentRepository',
    'delete_collection_batched',
    'load_credentials',
    'validate_batch_size',
]
