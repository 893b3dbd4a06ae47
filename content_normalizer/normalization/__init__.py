from content_normalizer.normalization.base import BaseNormalizer
from content_normalizer.normalization.factory import NormalizerFactory
from content_normalizer.normalization.normalizer import DEFAULT_ALLOWED_TAGS, HtmlNormalizer

__all__ = ["DEFAULT_ALLOWED_TAGS", "BaseNormalizer", "HtmlNormalizer", "NormalizerFactory"]
