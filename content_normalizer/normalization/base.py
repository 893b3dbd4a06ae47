from abc import ABC, abstractmethod


class BaseNormalizer(ABC):
    """Contract for all content normalizers."""

    @abstractmethod
    def normalize(self, text: str) -> str:
        """Rewrite markup-bearing text into its normalized form.

        Args:
            text: Raw field content that passed classification.

        Returns:
            Normalized text. Empty string when the input is blank.

        Raises:
            NormalizationError: on any failure.
        """
