class BatchConfigError(Exception):
    """Raised when the batch configuration file is missing or malformed."""
