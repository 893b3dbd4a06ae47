from psycopg import sql

from content_normalizer.database.base import BaseRecordSource
from content_normalizer.database.connection import get_connection
from content_normalizer.processor.models import Record


def _table_identifier(table_name: str) -> sql.Identifier:
    """Split ``schema.table`` into a quoted, schema-qualified identifier."""
    return sql.Identifier(*table_name.split("."))


class FieldRepository(BaseRecordSource):
    """Reads one column of any table, ordered by its primary key."""

    def fetch_records(self, table_name: str, primary_key: str, field: str) -> list[Record]:
        query = sql.SQL("SELECT {pk}, {field} FROM {table} ORDER BY {pk}").format(
            pk=sql.Identifier(primary_key),
            field=sql.Identifier(field),
            table=_table_identifier(table_name),
        )
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(query)
                return [
                    Record(primary_key=primary_key_value, raw_content=value)
                    for primary_key_value, value in cur.fetchall()
                ]
