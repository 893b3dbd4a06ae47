from dataclasses import dataclass


@dataclass(frozen=True)
class ClassificationResult:
    """Reasons a piece of content must be reviewed by hand. Empty means safe to normalize."""

    reasons: tuple[str, ...] = ()

    @property
    def requires_intervention(self) -> bool:
        return bool(self.reasons)

    @property
    def notes(self) -> str:
        return "\n".join(self.reasons)
