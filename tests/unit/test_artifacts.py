import csv
import io
import json

from content_normalizer.processor.artifacts import (
    build_change_file,
    build_report,
    render_filename,
)
from content_normalizer.processor.models import FieldTarget, OutcomeTag, ProcessingOutcome


def _outcome(
    tag: OutcomeTag,
    primary_key: int | str = 1,
    notes: str = "",
    old_value: str | None = None,
    new_value: str | None = None,
) -> ProcessingOutcome:
    return ProcessingOutcome(
        tag=tag,
        primary_key=primary_key,
        field_name="body",
        sql_text=f"SELECT * FROM public.pages WHERE id = {primary_key};",
        notes=notes,
        old_value=old_value,
        new_value=new_value,
    )


class TestRenderFilename:
    def test_substitutes_placeholders(self) -> None:
        target = FieldTarget(schema="public", table="pages", field="body")

        result = render_filename("output/%schema%.%table%.%field%;report.csv", target)

        assert result == "output/public.pages.body;report.csv"

    def test_substitutes_repeated_placeholders(self) -> None:
        target = FieldTarget(schema="s", table="t", field="f")

        assert render_filename("%field%/%field%", target) == "f/f"


class TestBuildChangeFile:
    def test_entries_keyed_by_primary_key_and_field(self) -> None:
        changes = [_outcome(OutcomeTag.CHANGED, 3, old_value="<p>é</p>", new_value="é")]

        data = build_change_file(changes, "page_id")

        assert json.loads(data) == [{"page_id": 3, "old_body": "<p>é</p>", "new_body": "é"}]

    def test_key_order_is_stable(self) -> None:
        changes = [_outcome(OutcomeTag.CHANGED, 3, old_value="a", new_value="b")]

        entry = json.loads(build_change_file(changes, "id"))[0]

        assert list(entry) == ["id", "old_body", "new_body"]

    def test_non_ascii_kept_literal(self) -> None:
        changes = [_outcome(OutcomeTag.CHANGED, 1, old_value="Café", new_value="Café’")]

        text = build_change_file(changes, "id").decode("utf-8")

        assert "Café’" in text
        assert "\\u" not in text

    def test_pretty_printed(self) -> None:
        changes = [_outcome(OutcomeTag.CHANGED, 1, old_value="a", new_value="b")]

        text = build_change_file(changes, "id").decode("utf-8")

        assert text.startswith("[\n    {\n        ")

    def test_empty_list(self) -> None:
        assert build_change_file([], "id") == b"[]"


class TestBuildReport:
    def test_header_row(self) -> None:
        text = build_report([], "id").decode("utf-8")

        assert text == "id (pk),field,sql,has_changed,manually_intervene,notes"

    def test_one_row_per_outcome_with_flags(self) -> None:
        outcomes = [
            _outcome(OutcomeTag.CHANGED, 1, "Field updated.", "a", "b"),
            _outcome(OutcomeTag.NEEDS_INTERVENTION, 2, "String contains a list tag."),
            _outcome(OutcomeTag.EMPTY, 3, "Field is empty, skipping."),
            _outcome(OutcomeTag.UNCHANGED, 4, "No changes."),
        ]

        rows = list(csv.reader(io.StringIO(build_report(outcomes, "id").decode("utf-8"))))

        assert len(rows) == 5
        assert rows[1] == [
            "1",
            "body",
            "SELECT * FROM public.pages WHERE id = 1;",
            "Y",
            "-",
            "Field updated.",
        ]
        assert rows[2][3:] == ["-", "Y", "String contains a list tag."]
        assert rows[3][3:] == ["-", "-", "Field is empty, skipping."]
        assert rows[4][3:] == ["-", "-", "No changes."]

    def test_no_trailing_newline(self) -> None:
        data = build_report([_outcome(OutcomeTag.UNCHANGED, 1, "No changes.")], "id")

        assert not data.endswith(b"\n")

    def test_multiline_notes_quoted(self) -> None:
        outcome = _outcome(OutcomeTag.NEEDS_INTERVENTION, 1, "one\ntwo")

        rows = list(csv.reader(io.StringIO(build_report([outcome], "id").decode("utf-8"))))

        assert rows[1][5] == "one\ntwo"
