"""Serializes a run's outcomes into the change file and the CSV report."""

import csv
import io
import json
from collections.abc import Iterable

from content_normalizer.processor.models import FieldTarget, ProcessingOutcome

REPORT_COLUMNS = ("field", "sql", "has_changed", "manually_intervene", "notes")


def render_filename(template: str, target: FieldTarget) -> str:
    """Substitute %schema%, %table% and %field% in a filename template."""
    return (
        template.replace("%schema%", target.schema)
        .replace("%table%", target.table)
        .replace("%field%", target.field)
    )


def change_entry(outcome: ProcessingOutcome, primary_key: str) -> dict[str, object]:
    return {
        primary_key: outcome.primary_key,
        f"old_{outcome.field_name}": outcome.old_value,
        f"new_{outcome.field_name}": outcome.new_value,
    }


def build_change_file(changes: Iterable[ProcessingOutcome], primary_key: str) -> bytes:
    """Pretty-printed JSON array of before/after values, non-ASCII kept literal."""
    entries = [change_entry(outcome, primary_key) for outcome in changes]
    return json.dumps(entries, indent=4, ensure_ascii=False).encode("utf-8")


def _flag(value: bool) -> str:
    return "Y" if value else "-"


def build_report(outcomes: Iterable[ProcessingOutcome], primary_key: str) -> bytes:
    """CSV with one header row and one row per outcome, rows separated by newlines.

    Returns:
        UTF-8 bytes without a trailing newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([f"{primary_key} (pk)", *REPORT_COLUMNS])
    for outcome in outcomes:
        writer.writerow(
            [
                outcome.primary_key,
                outcome.field_name,
                outcome.sql_text,
                _flag(outcome.has_changed),
                _flag(outcome.manually_intervene),
                outcome.notes,
            ]
        )
    return buffer.getvalue().removesuffix("\n").encode("utf-8")
