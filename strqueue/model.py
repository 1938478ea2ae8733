from enum import IntEnum
from typing import Sequence

from anystore.model import BaseModel


class Ordering(IntEnum):
    """Result of comparing two queues"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a: Sequence[str], b: Sequence[str]) -> "Ordering":
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL


class QueueModel(BaseModel):
    handle: int
    items: list[str] = []

    @property
    def size(self) -> int:
        return len(self.items)


class RegistryModel(BaseModel):
    next_handle: int
    queues: list[QueueModel] = []
