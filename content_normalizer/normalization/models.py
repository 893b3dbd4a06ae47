from dataclasses import dataclass


@dataclass(frozen=True)
class Replacement:
    """Literal search/replace applied after normalization. Skipped unless both sides are set."""

    search: str | None = None
    replace: str | None = None

    @property
    def is_applicable(self) -> bool:
        return bool(self.search) and bool(self.replace)
