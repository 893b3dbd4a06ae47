"""Flags markup that cannot be normalized unattended."""

from dataclasses import dataclass

from content_normalizer.classification.models import ClassificationResult


@dataclass(frozen=True)
class ClassificationRule:
    """A reason that applies when any of its markers appears in lower-cased content."""

    markers: tuple[str, ...]
    reason: str

    def matches(self, content: str) -> bool:
        return any(marker in content for marker in self.markers)


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        markers=("<font",),
        reason="String contains a <font> tag. Check the reason for this formatting.",
    ),
    ClassificationRule(
        markers=("<style",),
        reason="String contains a <style> tag. Check the reason for this formatting.",
    ),
    ClassificationRule(
        markers=("<a",),
        reason="String contains an <a> tag. Will need to de-link and re-word to suit.",
    ),
    ClassificationRule(
        markers=("<ul", "<ol", "<dl"),
        reason="String contains a list tag. Will need to re-format manually.",
    ),
)


class ContentClassifier:
    """Runs every rule against the content, in order, collecting one reason per match."""

    def __init__(self, rules: tuple[ClassificationRule, ...] = DEFAULT_RULES) -> None:
        self._rules = rules

    def classify(self, raw_content: str | None) -> ClassificationResult:
        if not raw_content:
            return ClassificationResult()
        content = raw_content.lower()
        return ClassificationResult(
            reasons=tuple(rule.reason for rule in self._rules if rule.matches(content))
        )
