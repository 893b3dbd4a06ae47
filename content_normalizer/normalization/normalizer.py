"""Deterministic HTML-to-editorial-text normalizer."""

import html
import re
from collections.abc import Callable, Iterable

from content_normalizer.config.settings import DEFAULT_ALLOWED_TAGS
from content_normalizer.logging.logger import Log
from content_normalizer.normalization.base import BaseNormalizer
from content_normalizer.normalization.exceptions import NormalizationError
from content_normalizer.normalization.models import Replacement
from content_normalizer.normalization.tags import strip_tags

# Space, tab, LF, CR, NUL and vertical tab; no-break spaces survive trimming.
TRIM_CHARACTERS = " \t\n\r\0\x0b"

_HEADINGS = tuple(f"h{level}" for level in range(1, 7))

_SPACE_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("\u00a0", " "),
    ("\u200b", ""),
)

_APOSTROPHE_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&#x27;", "\u2019"),
    ("&apos;", "\u2019"),
    ("&#039;", "'"),
)

_DOUBLE_BREAKS = ("<br/><br/>", "<br><br>", "<br></br>")

_BLOCK_SPACING: tuple[tuple[str, str], ...] = (
    ("<ul>", "<ul>\n"),
    ("</ul>", "</ul>\n\n"),
    ("</li>", "</li>\n"),
    *((f"</{tag}>", f"</{tag}>\n\n") for tag in _HEADINGS),
    ("</p>", "</p>\n\n"),
    ("</table>", "</table>\n\n"),
    ("</blockquote>", "</blockquote>\n\n"),
    ("</figure>", "</figure>\n\n"),
)

_HEADING_SPACING: tuple[tuple[str, str], ...] = tuple(
    (f"<{tag}>", f"\n\n<{tag}>") for tag in _HEADINGS
)

_BLANK_PARAGRAPH_RE = re.compile(r"<p>\s*</p>", re.ASCII)
_MULTIPLE_NEWLINES_RE = re.compile(r"\n\n+")
_EMPTY_HEADING_RE = re.compile(r"<(h[1-6])></\1>")

Step = Callable[[str], str]


def _replace_all(text: str, pairs: Iterable[tuple[str, str]]) -> str:
    for search, replace in pairs:
        text = text.replace(search, replace)
    return text


class HtmlNormalizer(BaseNormalizer):
    """Strips markup down to an allow-list and tidies whitespace and entities.

    The transformation is an ordered table of named steps; each step receives
    the previous step's output. Later steps rely on the newline conventions
    introduced by earlier ones, so the order is significant.
    """

    def __init__(
        self,
        allowed_tags: Iterable[str] = DEFAULT_ALLOWED_TAGS,
        replacements: Iterable[Replacement] = (),
    ) -> None:
        self._allowed_tags = tuple(tag.lower() for tag in allowed_tags)
        self._allowed_with_paragraphs = (*self._allowed_tags, "p")
        self._replacements = tuple(replacements)
        self._steps: tuple[tuple[str, Step], ...] = (
            ("collapse_spaces", self._collapse_spaces),
            ("normalize_apostrophes", self._normalize_apostrophes),
            ("collapse_double_breaks", self._collapse_double_breaks),
            ("remove_blank_paragraphs", self._remove_blank_paragraphs),
            ("strip_disallowed_tags", self._strip_keeping_paragraphs),
            ("decode_entities", html.unescape),
            ("space_block_tags", self._space_block_tags),
            ("strip_paragraphs", self._strip_to_allow_list),
            ("collapse_newlines", self._collapse_newlines),
            ("trim_line_starts", self._trim_line_starts),
            ("space_headings", self._space_headings),
            ("remove_empty_headings", self._remove_empty_headings),
            ("trim", self._trim),
            ("post_process", self._post_process),
        )

    @property
    def allowed_tags(self) -> tuple[str, ...]:
        return self._allowed_tags

    def normalize(self, text: str) -> str:
        try:
            text = self._trim(text)
            if text == "":
                return ""
            for name, step in self._steps:
                text = step(text)
                Log.debug(f"Normalization step '{name}': {len(text)} chars")
            return text
        except Exception as exc:
            raise NormalizationError(f"HTML normalization failed: {exc}") from exc

    @staticmethod
    def _trim(text: str) -> str:
        return text.strip(TRIM_CHARACTERS)

    @staticmethod
    def _collapse_spaces(text: str) -> str:
        return _replace_all(text, _SPACE_REPLACEMENTS)

    @staticmethod
    def _normalize_apostrophes(text: str) -> str:
        return _replace_all(text, _APOSTROPHE_REPLACEMENTS)

    @staticmethod
    def _collapse_double_breaks(text: str) -> str:
        return _replace_all(text, ((spelling, "\n\n") for spelling in _DOUBLE_BREAKS))

    @staticmethod
    def _remove_blank_paragraphs(text: str) -> str:
        return _BLANK_PARAGRAPH_RE.sub("", text)

    def _strip_keeping_paragraphs(self, text: str) -> str:
        return strip_tags(text, self._allowed_with_paragraphs)

    @staticmethod
    def _space_block_tags(text: str) -> str:
        return _replace_all(text, _BLOCK_SPACING)

    def _strip_to_allow_list(self, text: str) -> str:
        return strip_tags(text, self._allowed_tags)

    @staticmethod
    def _collapse_newlines(text: str) -> str:
        return _MULTIPLE_NEWLINES_RE.sub("\n\n", text)

    @staticmethod
    def _trim_line_starts(text: str) -> str:
        return text.replace("\n ", "\n")

    @staticmethod
    def _space_headings(text: str) -> str:
        return _replace_all(text, _HEADING_SPACING)

    @staticmethod
    def _remove_empty_headings(text: str) -> str:
        return _EMPTY_HEADING_RE.sub("", text)

    def _post_process(self, text: str) -> str:
        for replacement in self._replacements:
            if replacement.is_applicable:
                text = text.replace(replacement.search, replacement.replace)  # type: ignore[arg-type]
        return text
