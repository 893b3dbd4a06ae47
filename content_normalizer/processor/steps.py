from content_normalizer.database.base import BaseRecordSource
from content_normalizer.logging.logger import Log
from content_normalizer.processor.artifacts import build_change_file, build_report
from content_normalizer.processor.exceptions import DataSourceError, OutputWriteError
from content_normalizer.processor.pipeline import PipelineStep, RunContext
from content_normalizer.processor.record_processor import RecordProcessor
from content_normalizer.storage.base import BaseStorage


class FetchRecordsStep(PipelineStep):
    def __init__(self, source: BaseRecordSource) -> None:
        self._source = source

    def run(self, context: RunContext) -> RunContext:
        target = context.target
        Log.info(f"Checking records for: {target}")
        try:
            context.records = self._source.fetch_records(
                target.table_name, target.primary_key, target.field
            )
        except Exception as exc:
            Log.critical(f"Cannot read records for {target}: {exc}")
            raise DataSourceError(str(exc)) from exc
        Log.debug(f"Fetched {len(context.records)} records for {target}")
        return context


class ProcessRecordsStep(PipelineStep):
    def __init__(self, record_processor: RecordProcessor) -> None:
        self._record_processor = record_processor

    def run(self, context: RunContext) -> RunContext:
        if context.result is None:
            raise ValueError("RunContext.result must be set before processing records")
        target = context.target
        for record in context.records:
            outcome = self._record_processor.process(
                record,
                primary_key_field=target.primary_key,
                field_name=target.field,
                table_name=target.table_name,
            )
            context.result.outcomes.append(outcome)
            context.result.summary.record(outcome)
            Log.debug(f"Record {record.primary_key}: {outcome.tag.value}")
        return context


class WriteChangeFileStep(PipelineStep):
    def __init__(self, storage: BaseStorage) -> None:
        self._storage = storage

    def run(self, context: RunContext) -> RunContext:
        if context.result is None:
            raise ValueError("RunContext.result must be set before writing the change file")
        if context.target.no_output:
            Log.debug(f"Output suppressed for {context.target}")
            return context
        data = build_change_file(context.result.changes, context.target.primary_key)
        _put(self._storage, context.output_filename, data)
        return context


class WriteReportStep(PipelineStep):
    def __init__(self, storage: BaseStorage) -> None:
        self._storage = storage

    def run(self, context: RunContext) -> RunContext:
        if context.result is None:
            raise ValueError("RunContext.result must be set before writing the report")
        data = build_report(context.result.outcomes, context.target.primary_key)
        _put(self._storage, context.report_filename, data)
        return context


def _put(storage: BaseStorage, name: str, data: bytes) -> None:
    try:
        storage.put(name, data)
    except Exception as exc:
        Log.critical(f"Cannot write {name}: {exc}")
        raise OutputWriteError(str(exc)) from exc
    Log.debug(f"Wrote {len(data)} bytes to {name}")
