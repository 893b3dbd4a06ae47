from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Record:
    """One row of the target table: its primary key and the field being normalized."""

    primary_key: int | str
    raw_content: str | None


@dataclass(frozen=True)
class FieldTarget:
    """Identifies the column one run normalizes."""

    schema: str
    table: str
    field: str
    primary_key: str = "id"
    no_output: bool = False

    @property
    def table_name(self) -> str:
        return f"{self.schema}.{self.table}"

    def __str__(self) -> str:
        return f"{self.table_name}.{self.field}"


class OutcomeTag(Enum):
    EMPTY = "empty"
    CHANGED = "changed"
    UNCHANGED = "unchanged"
    NEEDS_INTERVENTION = "needs_intervention"


@dataclass(frozen=True)
class ProcessingOutcome:
    """What happened to one record."""

    tag: OutcomeTag
    primary_key: int | str
    field_name: str
    sql_text: str
    notes: str
    old_value: str | None = None
    new_value: str | None = None

    @property
    def has_changed(self) -> bool:
        return self.tag is OutcomeTag.CHANGED

    @property
    def manually_intervene(self) -> bool:
        return self.tag is OutcomeTag.NEEDS_INTERVENTION


@dataclass
class RunSummary:
    """Counters for one run. Every record lands in exactly one bucket."""

    checked: int = 0
    changed: int = 0
    unchanged: int = 0
    manual_intervention: int = 0

    def record(self, outcome: ProcessingOutcome) -> None:
        self.checked += 1
        if outcome.tag is OutcomeTag.CHANGED:
            self.changed += 1
        elif outcome.tag is OutcomeTag.NEEDS_INTERVENTION:
            self.manual_intervention += 1
        else:
            # Empty fields count as unchanged.
            self.unchanged += 1


@dataclass
class RunResult:
    """Everything a single-field run produced."""

    target: FieldTarget
    summary: RunSummary = field(default_factory=RunSummary)
    outcomes: list[ProcessingOutcome] = field(default_factory=list)

    @property
    def changes(self) -> list[ProcessingOutcome]:
        return [outcome for outcome in self.outcomes if outcome.has_changed]
