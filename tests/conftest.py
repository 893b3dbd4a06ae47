from pathlib import Path

import pytest

from content_normalizer.classification.classifier import ContentClassifier
from content_normalizer.config.settings import Settings
from content_normalizer.database.base import BaseRecordSource
from content_normalizer.normalization.normalizer import HtmlNormalizer
from content_normalizer.processor.models import Record
from content_normalizer.processor.processor import FieldProcessor
from content_normalizer.processor.record_processor import RecordProcessor
from content_normalizer.storage.base import BaseStorage
from content_normalizer.storage.exceptions import StorageError


class InMemoryRecordSource(BaseRecordSource):
    """Serves fixed records in the given order and remembers what it was asked for."""

    def __init__(self, records: list[Record] | None = None) -> None:
        self.records = records or []
        self.calls: list[tuple[str, str, str]] = []

    def fetch_records(self, table_name: str, primary_key: str, field: str) -> list[Record]:
        self.calls.append((table_name, primary_key, field))
        return list(self.records)


class InMemoryStorage(BaseStorage):
    """Keeps blobs in a dict."""

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}

    def put(self, name: str, data: bytes) -> None:
        self.blobs[name] = data

    def get(self, name: str) -> bytes:
        if name not in self.blobs:
            raise StorageError(f"File not found: {name}")
        return self.blobs[name]


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(storage_root=str(tmp_path), _env_file=None)  # type: ignore[call-arg]


@pytest.fixture()
def record_source() -> InMemoryRecordSource:
    return InMemoryRecordSource()


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def record_processor() -> RecordProcessor:
    return RecordProcessor(classifier=ContentClassifier(), normalizer=HtmlNormalizer())


@pytest.fixture()
def field_processor(
    record_source: InMemoryRecordSource,
    storage: InMemoryStorage,
    record_processor: RecordProcessor,
    settings: Settings,
) -> FieldProcessor:
    return FieldProcessor(
        source=record_source,
        storage=storage,
        record_processor=record_processor,
        settings=settings,
    )
