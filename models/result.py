from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar('T')


class StoreErrorKind(Enum):
    NOT_FOUND = 'not_found'
    STORE_ERROR = 'store_error'


@dataclass
class OperationResult(Generic[T]):
    value: T | None = None
    error: StoreErrorKind | None = None
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: T | None = None) -> 'OperationResult[T]':
        return cls(value=value)

    @classmethod
    def not_found(cls) -> 'OperationResult[T]':
        return cls(error=StoreErrorKind.NOT_FOUND)

    @classmethod
    def failure(cls, cause: BaseException) -> 'OperationResult[T]':
        return cls(error=StoreErrorKind.STORE_ERROR, cause=cause)
