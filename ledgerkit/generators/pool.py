"""Pre-generated value pools for fast data generation.

Replaces per-call Faker invocations with O(1) random.choice() lookups
from pre-populated pools.

Usage::

    pool = FakerPool(seed=42)
    first = pool.first_name()   # random.choice from 200 first names
    uid  = pool.uuid()          # batch-generated via os.urandom
"""

from __future__ import annotations

import os
import random
import uuid as _uuid

from faker import Faker


class UUIDPool:
    """Batch-generated UUIDs using os.urandom for minimal syscall overhead.

    Parameters
    ----------
    batch_size : int
        Number of UUIDs to generate per batch (default 1024).
    """

    __slots__ = ("_batch_size", "_pool", "_index")

    def __init__(self, batch_size: int = 1024) -> None:
        self._batch_size = batch_size
        self._pool: list[str] = []
        self._index = 0
        self._refill()

    def _refill(self) -> None:
        """Generate a new batch of UUIDs."""
        raw = os.urandom(16 * self._batch_size)
        self._pool = [
            _uuid.UUID(bytes=raw[i : i + 16], version=4).hex
            for i in range(0, len(raw), 16)
        ]
        self._index = 0

    def next(self) -> str:
        """Return next UUID hex string, refilling pool when exhausted."""
        if self._index >= len(self._pool):
            self._refill()
        val = self._pool[self._index]
        self._index += 1
        return val


class FakerPool:
    """Pre-generated pools of Faker values for fast random selection.

    Parameters
    ----------
    locale : str
        Faker locale (default ``en_US``).
    seed : int | None
        Random seed for reproducibility of the pooled values.
    pool_sizes : dict[str, int] | None
        Override default pool sizes per field.
    """

    DEFAULT_SIZES: dict[str, int] = {
        "first_name": 200,
    }

    def __init__(
        self,
        locale: str = "en_US",
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
    ) -> None:
        sizes = {**self.DEFAULT_SIZES, **(pool_sizes or {})}
        fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)

        self._first_names: list[str] = [fake.first_name() for _ in range(sizes["first_name"])]

        # UUIDs come from os.urandom and are never seeded
        self._uuid_pool = UUIDPool()

    def uuid(self) -> str:
        """Return a unique UUID4 hex string."""
        return self._uuid_pool.next()

    def first_name(self) -> str:
        """Return a random first name."""
        return random.choice(self._first_names)
