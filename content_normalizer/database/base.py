from abc import ABC, abstractmethod

from content_normalizer.processor.models import Record


class BaseRecordSource(ABC):
    """Contract for anything that can supply the rows of one field."""

    @abstractmethod
    def fetch_records(self, table_name: str, primary_key: str, field: str) -> list[Record]:
        """Return every row's primary key and field value, ordered by primary key.

        Args:
            table_name: Schema-qualified table, e.g. ``public.pages``.
            primary_key: Primary key column name.
            field: Column holding the content to normalize.

        Raises:
            Exception: any failure to read is fatal for the run.
        """
