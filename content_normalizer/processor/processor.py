from pathlib import Path

from content_normalizer.classification.classifier import ContentClassifier
from content_normalizer.config.settings import Settings
from content_normalizer.database.base import BaseRecordSource
from content_normalizer.database.repositories.field_repository import FieldRepository
from content_normalizer.logging.logger import Log
from content_normalizer.normalization.factory import NormalizerFactory
from content_normalizer.processor.artifacts import render_filename
from content_normalizer.processor.models import FieldTarget, RunResult, RunSummary
from content_normalizer.processor.pipeline import PipelineStep, RunContext
from content_normalizer.processor.record_processor import RecordProcessor
from content_normalizer.processor.steps import (
    FetchRecordsStep,
    ProcessRecordsStep,
    WriteChangeFileStep,
    WriteReportStep,
)
from content_normalizer.storage.base import BaseStorage
from content_normalizer.storage.local_storage import LocalStorage


class FieldProcessor:
    """Normalizes one (schema, table, field) column end to end.

    Pipeline: fetch -> process each record -> write change file -> write report.
    Data-source and write failures propagate as ProcessorError subclasses; the
    summary is only logged when every step succeeded.
    """

    def __init__(
        self,
        source: BaseRecordSource,
        storage: BaseStorage,
        record_processor: RecordProcessor,
        settings: Settings,
    ) -> None:
        self._settings = settings
        self._steps: list[PipelineStep] = [
            FetchRecordsStep(source),
            ProcessRecordsStep(record_processor),
            WriteChangeFileStep(storage),
            WriteReportStep(storage),
        ]

    def run(
        self,
        target: FieldTarget,
        output_template: str | None = None,
        report_template: str | None = None,
    ) -> RunResult:
        context = RunContext(
            target=target,
            output_filename=render_filename(
                output_template or self._settings.output_template, target
            ),
            report_filename=render_filename(
                report_template or self._settings.report_template, target
            ),
        )
        for step in self._steps:
            context = step.run(context)

        if context.result is None:
            raise ValueError("RunContext.result missing after pipeline")
        self._log_summary(context.result.summary, target, context.output_filename)
        return context.result

    @staticmethod
    def _log_summary(summary: RunSummary, target: FieldTarget, output_filename: str) -> None:
        Log.info("---")
        Log.info(f"Records found: {summary.checked}")
        if target.no_output:
            Log.info(
                f"Records normalised: {summary.changed} "
                "(run without --no-output to generate a .json file)"
            )
        else:
            Log.info(f"Records normalised: {summary.changed} (see {output_filename})")
        Log.info(f"Records unchanged: {summary.unchanged}")
        Log.info(
            f"Records require manual intervention: {summary.manual_intervention} "
            "(see .csv report)"
        )


def build_field_processor(
    settings: Settings,
    storage_root: Path | None = None,
) -> FieldProcessor:
    """Build a FieldProcessor backed by PostgreSQL and local disk."""
    storage = LocalStorage(
        root=storage_root if storage_root is not None else Path(settings.storage_root)
    )
    record_processor = RecordProcessor(
        classifier=ContentClassifier(),
        normalizer=NormalizerFactory.create(settings),
    )
    return FieldProcessor(
        source=FieldRepository(),
        storage=storage,
        record_processor=record_processor,
        settings=settings,
    )
