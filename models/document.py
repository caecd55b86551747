from dataclasses import dataclass, field
from typing import Any


@dataclass
class Document:
    id: str
    collection: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class EraseStats:
    collection: str
    batches: int = 0
    deleted: int = 0
