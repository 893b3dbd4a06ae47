import json

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from content_normalizer.batch.exceptions import BatchConfigError
from content_normalizer.processor.models import FieldTarget


class BatchEntry(BaseModel):
    """One field to normalize in a batch run."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    schema_name: str = Field(alias="schema")
    table: str
    field: str
    primary_key: str = "id"
    no_output: bool = False

    @field_validator("primary_key", mode="before")
    @classmethod
    def _default_primary_key(cls, value: object) -> object:
        return value or "id"

    def to_target(self, force_no_output: bool = False) -> FieldTarget:
        return FieldTarget(
            schema=self.schema_name,
            table=self.table,
            field=self.field,
            primary_key=self.primary_key,
            no_output=self.no_output or force_no_output,
        )


def load_batch_items(raw: bytes) -> list[object]:
    """Parse the batch file into its raw list of entries.

    Raises:
        BatchConfigError: on invalid JSON or when the document is not a list.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise BatchConfigError(f"Invalid batch JSON: {exc}") from exc
    if not isinstance(data, list):
        raise BatchConfigError("Batch file must contain a JSON list")
    return data


def build_batch_entry(item: object, index: int) -> BatchEntry:
    """Validate one raw batch item.

    Raises:
        BatchConfigError: if the item is not a valid {schema, table, field} object.
    """
    try:
        return BatchEntry.model_validate(item)
    except ValidationError as exc:
        raise BatchConfigError(f"Batch entry at index {index} is invalid: {exc}") from exc

