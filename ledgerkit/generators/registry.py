"""Record generator for the registry domain."""

import itertools
import random
from typing import Iterator

from ledgerkit.generators.base import BaseGenerator
from ledgerkit.generators.pool import FakerPool
from ledgerkit.models.registry import Record


class RecordGenerator(BaseGenerator):
    """Generate synthetic student-like records.

    Ids are sequential integers starting at ``start_id`` so generated
    records never collide within one generator.
    """

    GROUPS = ["CS", "Math", "Physics", "Biology", "History"]
    GROUP_WEIGHTS = [0.35, 0.25, 0.20, 0.12, 0.08]

    AGE_RANGE = (18, 25)
    SCORE_RANGE = (2.0, 4.0)

    def __init__(
        self,
        seed: int | None = None,
        start_id: int = 1,
        pool: FakerPool | None = None,
    ) -> None:
        super().__init__(seed, pool=pool)
        self._ids = itertools.count(start_id)

    def generate(self) -> Record:
        """Generate a single record.

        Returns
        -------
        Record
            Generated record.
        """
        group = random.choices(self.GROUPS, weights=self.GROUP_WEIGHTS, k=1)[0]
        return Record(
            record_id=next(self._ids),
            name=self.pool.first_name(),
            age=random.randint(*self.AGE_RANGE),
            group=group,
            score=round(random.uniform(*self.SCORE_RANGE), 2),
        )

    def generate_batch(self, count: int) -> Iterator[Record]:
        """Generate multiple records.

        Parameters
        ----------
        count : int
            Number of records to generate.

        Yields
        ------
        Record
            Generated records.
        """
        for _ in range(count):
            yield self.generate()
