class NormalizationError(Exception):
    """Raised when normalization fails."""
