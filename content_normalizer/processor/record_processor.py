from content_normalizer.classification.classifier import ContentClassifier
from content_normalizer.normalization.base import BaseNormalizer
from content_normalizer.processor.models import OutcomeTag, ProcessingOutcome, Record
from content_normalizer.processor.sql import diagnostic_sql

EMPTY_NOTE = "Field is empty, skipping."
UNCHANGED_NOTE = "No changes."
CHANGED_NOTE = "Field updated."


class RecordProcessor:
    """Classifies and normalizes a single record.

    Flow: empty check -> classify -> normalize -> compare. Any exception raised
    while classifying or normalizing turns into a NEEDS_INTERVENTION outcome,
    so ``process`` always returns and never raises for a bad record.
    """

    def __init__(self, classifier: ContentClassifier, normalizer: BaseNormalizer) -> None:
        self._classifier = classifier
        self._normalizer = normalizer

    def process(
        self,
        record: Record,
        primary_key_field: str,
        field_name: str,
        table_name: str,
    ) -> ProcessingOutcome:
        sql_text = diagnostic_sql(table_name, primary_key_field, record.primary_key)

        def outcome(tag: OutcomeTag, notes: str, **values: str) -> ProcessingOutcome:
            return ProcessingOutcome(
                tag=tag,
                primary_key=record.primary_key,
                field_name=field_name,
                sql_text=sql_text,
                notes=notes,
                **values,
            )

        content = record.raw_content
        if not content:
            return outcome(OutcomeTag.EMPTY, EMPTY_NOTE)

        try:
            classification = self._classifier.classify(content)
            if classification.requires_intervention:
                return outcome(OutcomeTag.NEEDS_INTERVENTION, classification.notes)

            normalized = self._normalizer.normalize(content)
        except Exception as exc:
            return outcome(OutcomeTag.NEEDS_INTERVENTION, f"Exception: {exc}")

        if normalized == content:
            return outcome(OutcomeTag.UNCHANGED, UNCHANGED_NOTE)
        return outcome(
            OutcomeTag.CHANGED,
            CHANGED_NOTE,
            old_value=content,
            new_value=normalized,
        )
