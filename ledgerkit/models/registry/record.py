"""Record model for the registry domain."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Record:
    """Immutable student-like record.

    Only ``record_id`` takes part in equality and hashing, so two records
    with the same id are the same entity even if every other field differs.
    """

    record_id: int | str
    name: str = field(compare=False)
    age: int = field(compare=False)
    group: str | None = field(compare=False)  # major, department, class...
    score: float = field(compare=False)  # GPA on a 0.0-4.0 scale

    def __str__(self) -> str:
        return f"{self.record_id} - {self.name} | {self.group} | age {self.age} | score {self.score:.2f}"
