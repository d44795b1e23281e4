"""Registry: append-only record collection with derived read-only views."""

import heapq
import logging
from typing import Iterator

from ledgerkit.config import RegistryConfig
from ledgerkit.exceptions import DuplicateRecordError, InvalidArgumentError
from ledgerkit.models.registry import GroupSummary, Record, RegistryReport

logger = logging.getLogger(__name__)


def rank_key(record: Record) -> tuple[float, str]:
    """Sort key for score descending, then name ascending."""
    return (-record.score, record.name)


class Registry:
    """In-memory store for records, preserving insertion order.

    Internal storage is never handed out: every query returns a fresh
    sequence or mapping, so callers cannot mutate the registry except
    through ``add``.

    Parameters
    ----------
    config : RegistryConfig | None
        Duplicate-id policy and report layout.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self.config = config or RegistryConfig()
        self._records: list[Record] = []
        self._ids: set[int | str] = set()

    def add(self, record: Record) -> None:
        """Append a record (amortized O(1))."""
        if record is None:
            raise InvalidArgumentError("Record required")
        if record.record_id in self._ids and self.config.reject_duplicate_ids:
            logger.warning(
                "Rejected duplicate record id %s", record.record_id, extra={"record_id": record.record_id}
            )
            raise DuplicateRecordError(f"Record {record.record_id} already exists")

        self._records.append(record)
        self._ids.add(record.record_id)
        logger.debug("Added record %s", record.record_id)

    def all(self) -> tuple[Record, ...]:
        """Immutable snapshot of all records in insertion order."""
        return tuple(self._records)

    def find_by_id(self, record_id: int | str) -> Record | None:
        """Return the first record with ``record_id``, or None."""
        for record in self._records:
            if record.record_id == record_id:
                return record
        return None

    def filter_by_group(self, group: str | None) -> list[Record]:
        """Records whose group matches ``group`` case-insensitively.

        Records without a group never match, and a None filter matches
        nothing.
        """
        if group is None:
            return []
        wanted = group.casefold()
        return [r for r in self._records if r.group is not None and r.group.casefold() == wanted]

    def sort_by_score_desc_then_name(self) -> list[Record]:
        """New list ordered by score descending, then name ascending.

        The sort is stable, so full ties keep insertion order.
        """
        return sorted(self._records, key=rank_key)

    def group_by_group(self) -> dict[str | None, list[Record]]:
        """Records keyed by group, in first-seen group order."""
        grouped: dict[str | None, list[Record]] = {}
        for record in self._records:
            grouped.setdefault(record.group, []).append(record)
        return grouped

    def summarize(self) -> RegistryReport:
        """Compute totals, averages and per-group top-N in one pass."""
        total_score = 0.0
        grouped: dict[str | None, list[Record]] = {}
        group_scores: dict[str | None, float] = {}
        for record in self._records:
            total_score += record.score
            grouped.setdefault(record.group, []).append(record)
            group_scores[record.group] = group_scores.get(record.group, 0.0) + record.score

        total = len(self._records)
        overall = total_score / total if total else 0.0

        groups = [
            GroupSummary(
                group=group,
                count=len(members),
                average=group_scores[group] / len(members),
                # nsmallest is stable, like sorted(...)[:n]
                top=heapq.nsmallest(self.config.top_n, members, key=rank_key),
            )
            for group, members in grouped.items()
        ]
        return RegistryReport(
            title=self.config.report_title,
            total=total,
            overall_average=overall,
            groups=groups,
        )

    def report(self) -> str:
        """Human-readable multi-line report."""
        return self.summarize().render()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.all())
