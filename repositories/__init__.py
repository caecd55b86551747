from .document import DocumentRepository
from .errors import InvalidBatchSizeError, NotInitializedError

__all__ = ['DocumentRepository', 'InvalidBatchSizeError', 'NotInitializedError']
