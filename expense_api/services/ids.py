"""Identifier generation capability.

Routers depend on the `IdGenerator` protocol rather than on ``uuid`` so
tests (or another host) can plug in deterministic identifiers.
"""

from __future__ import annotations

import uuid
from typing import Iterable, Iterator, Protocol


class IdGenerator(Protocol):
    def __call__(self) -> str: ...


def uuid4_id() -> str:
    """Random 128-bit identifier in canonical UUID text form."""
    return str(uuid.uuid4())


class SequenceIdGenerator:
    """Hands out pre-seeded identifiers in order; raises once exhausted."""

    def __init__(self, ids: Iterable[str]):
        self._ids: Iterator[str] = iter(ids)

    def __call__(self) -> str:
        try:
            return next(self._ids)
        except StopIteration:
            raise RuntimeError("id sequence exhausted") from None
