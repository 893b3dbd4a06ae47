import traceback

from content_normalizer.batch.models import BatchEntry, build_batch_entry, load_batch_items
from content_normalizer.config.settings import Settings
from content_normalizer.logging.logger import Log
from content_normalizer.processor.models import RunResult
from content_normalizer.processor.processor import FieldProcessor
from content_normalizer.storage.base import BaseStorage


class BatchRunner:
    """Run the field processor once per batch entry, one failure never stopping the rest."""

    def __init__(
        self,
        field_processor: FieldProcessor,
        storage: BaseStorage,
        settings: Settings,
    ) -> None:
        self._field_processor = field_processor
        self._storage = storage
        self._settings = settings

    def run(self, no_output: bool = False) -> list[RunResult]:
        """Process every entry of the configured batch file in order."""
        try:
            items = load_batch_items(self._storage.get(self._settings.batch_file))
        except Exception as exc:
            Log.critical(f"Cannot load batch file {self._settings.batch_file}: {exc}")
            return []

        Log.info(f"Batch contains {len(items)} entries")
        results: list[RunResult] = []
        for index, item in enumerate(items):
            Log.info("=============")
            result = self._run_entry(item, index, no_output)
            if result is not None:
                results.append(result)
        Log.info(f"Batch finished: {len(results)} of {len(items)} entries succeeded")
        return results

    def _run_entry(self, item: object, index: int, no_output: bool) -> RunResult | None:
        """Run one entry; log and swallow its failure so the batch continues."""
        try:
            entry: BatchEntry = build_batch_entry(item, index)
            return self._field_processor.run(entry.to_target(force_no_output=no_output))
        except Exception as exc:
            Log.error(f"Batch entry {index} failed: {exc}")
            if Log.is_verbose():
                Log.debug(traceback.format_exc())
            return None
