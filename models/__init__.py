from .document import Document, EraseStats
from .result import OperationResult, StoreErrorKind

__all__ = ['Document', 'EraseStats', 'OperationResult', 'StoreErrorKind']
