"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC

from ledgerkit.generators.pool import FakerPool


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: seed-based reproducibility and a
    FakerPool that can be shared between generators.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale for the pool (default ``en_US``).
    pool : FakerPool | None
        Pre-generated value pool. Built from ``locale`` and ``seed``
        when not given.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        pool: FakerPool | None = None,
    ) -> None:
        if seed is not None:
            random.seed(seed)
        self.pool = pool or FakerPool(locale=locale, seed=seed)
