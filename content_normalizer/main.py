import argparse
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path

from content_normalizer.batch.batch_runner import BatchRunner
from content_normalizer.config.settings import Settings
from content_normalizer.database.connection import close_pool, init_pool
from content_normalizer.logging.logger import Log
from content_normalizer.processor.exceptions import ProcessorError
from content_normalizer.processor.models import FieldTarget
from content_normalizer.processor.processor import build_field_processor
from content_normalizer.storage.local_storage import LocalStorage


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="content-normalizer",
        description=(
            "Reads one field of a database table, flags content that needs manual "
            "review, normalizes the rest and writes a JSON change file and a CSV report."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output and tracebacks")
    commands = parser.add_subparsers(dest="command", required=True)

    single = commands.add_parser("normalize", help="Normalize a single schema.table.field")
    single.add_argument("schema", help="The database schema to access data from")
    single.add_argument("table", help="The database table to access data from")
    single.add_argument("field", help="The database field to retrieve")
    single.add_argument(
        "--no-output",
        action="store_true",
        help="Only create the CSV report, not the output JSON",
    )
    single.add_argument(
        "--primary-key",
        default=settings.default_primary_key,
        help="The primary key of the database table (default: %(default)s)",
    )
    single.add_argument(
        "--output",
        default=settings.output_template,
        help="Template of the output data file (default: %(default)s)",
    )
    single.add_argument(
        "--report",
        default=settings.report_template,
        help="Template of the output report file (default: %(default)s)",
    )

    batch = commands.add_parser(
        "batch",
        help=f"Normalize every field listed in {settings.batch_file} under the storage root",
    )
    batch.add_argument(
        "--no-output",
        action="store_true",
        help="Only create the CSV reports, not the output JSON files",
    )
    return parser


def target_from_args(args: argparse.Namespace) -> FieldTarget:
    return FieldTarget(
        schema=args.schema,
        table=args.table,
        field=args.field,
        primary_key=args.primary_key,
        no_output=args.no_output,
    )


def _log_traceback() -> None:
    if Log.is_verbose():
        Log.debug(traceback.format_exc())


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> initialize pool -> run command -> close pool."""
    settings = Settings()
    args = build_parser(settings).parse_args(argv)
    Log.configure("DEBUG" if args.verbose else settings.log_level, settings.log_file)

    try:
        init_pool(settings)
        processor = build_field_processor(settings)
        if args.command == "batch":
            storage = LocalStorage(root=Path(settings.storage_root))
            BatchRunner(processor, storage, settings).run(no_output=args.no_output)
        else:
            processor.run(
                target_from_args(args),
                output_template=args.output,
                report_template=args.report,
            )
    except ProcessorError as exc:
        Log.error(str(exc))
        _log_traceback()
        return 1
    except Exception as exc:
        Log.critical(f"Unexpected failure: {exc}")
        _log_traceback()
        return 1
    finally:
        close_pool()
    return 0


if __name__ == "__main__":
    sys.exit(main())
