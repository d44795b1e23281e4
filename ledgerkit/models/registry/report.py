"""Derived report structures for the registry domain."""

from dataclasses import dataclass, field

from ledgerkit.models.registry.record import Record


@dataclass
class GroupSummary:
    """Aggregate view of one group of records."""

    group: str | None
    count: int
    average: float
    top: list[Record] = field(default_factory=list)


@dataclass
class RegistryReport:
    """Registry-wide aggregates, renderable as a plain-text report."""

    title: str
    total: int
    overall_average: float
    groups: list[GroupSummary] = field(default_factory=list)

    def render(self) -> str:
        """Render the report as human-readable text.

        Layout: a header, the total count, the overall average, then for
        each group a summary line followed by its ranked records (``#1``,
        ``#2``, ...). Averages are formatted to two decimal places.
        """
        lines = [
            f"=== {self.title} ===",
            f"Total: {self.total}",
            f"Avg score (all): {self.overall_average:.2f}",
            "",
        ]
        for summary in self.groups:
            lines.append(f"[Group] {summary.group} | Avg score: {summary.average:.2f}")
            for rank, record in enumerate(summary.top, start=1):
                lines.append(f"  #{rank} {record}")
            lines.append("")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
