"""Student registry scenario: seed a registry and derive its report."""

import logging
from typing import Any

from ledgerkit.config import RegistryConfig
from ledgerkit.generators import RecordGenerator
from ledgerkit.models.registry import Record
from ledgerkit.store import Registry

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS: list[Record] = [
    Record(101, "An", 19, "CS", 3.4),
    Record(102, "Binh", 20, "Math", 3.8),
    Record(103, "Chi", 21, "CS", 3.9),
    Record(104, "Dung", 20, "Physics", 3.2),
    Record(105, "Hoa", 19, "Math", 3.1),
    Record(106, "Linh", 22, "CS", 3.7),
]


class StudentRegistryScenario:
    """Populate a registry with students and export its derived views.

    With ``num_records`` unset the six fixed sample students are used;
    otherwise that many records are generated.
    """

    def __init__(
        self,
        num_records: int | None = None,
        seed: int | None = None,
        config: RegistryConfig | None = None,
    ) -> None:
        """Initialize the registry scenario.

        Parameters
        ----------
        num_records : int | None
            Number of generated records, or None for the sample students.
        seed : int | None
            Random seed for reproducibility of generated records.
        config : RegistryConfig | None
            Registry configuration.
        """
        self.num_records = num_records
        self.seed = seed
        self.registry = Registry(config)

    def generate(self) -> Registry:
        """Fill the registry and return it."""
        if self.num_records is None:
            records = list(SAMPLE_STUDENTS)
        else:
            records = list(RecordGenerator(seed=self.seed).generate_batch(self.num_records))

        for record in records:
            self.registry.add(record)

        logger.info(
            "Registry populated with %d records in %d groups",
            len(self.registry),
            len(self.registry.group_by_group()),
        )
        return self.registry

    def export(self, sinks: list[Any]) -> None:
        """Export records, the ranked view and the text report to sinks."""
        for sink in sinks:
            sink.write_batch("records", list(self.registry.all()))
            sink.write_batch("records_ranked", self.registry.sort_by_score_desc_then_name())
            sink.write_report("registry_report", self.registry.report())

        logger.info("Exported registry to %d sinks", len(sinks))
