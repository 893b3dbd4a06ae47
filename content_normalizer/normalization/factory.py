from content_normalizer.config.settings import Settings
from content_normalizer.normalization.base import BaseNormalizer
from content_normalizer.normalization.models import Replacement
from content_normalizer.normalization.normalizer import HtmlNormalizer


class NormalizerFactory:
    """Creates the configured normalizer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseNormalizer:
        """Create an HtmlNormalizer from the allow-list and replacements in settings."""
        return HtmlNormalizer(
            allowed_tags=settings.allowed_tags,
            replacements=cls._resolve_replacements(settings),
        )

    @classmethod
    def _resolve_replacements(cls, settings: Settings) -> list[Replacement]:
        return [
            Replacement(search=item.search, replace=item.replace)
            for item in settings.post_processing_replacements
        ]
