class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DataSourceError(ProcessorError):
    """Raised when the records of a field cannot be read."""


class OutputWriteError(ProcessorError):
    """Raised when the change file or report cannot be written."""
