"""Identifier factories injected into every operation that creates an entity."""
import itertools
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def uuid_ids() -> IdFactory:
    """Random UUID4 strings."""
    return lambda: str(uuid.uuid4())


class SequentialIds:
    """Deterministic ids: prefix-1, prefix-2, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"
