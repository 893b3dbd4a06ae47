"""Allow-list based tag stripping."""

import re
from collections.abc import Iterable

_COMMENT_RE = re.compile(r"<!--.*?(?:-->|\Z)", re.DOTALL)
_TAG_RE = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9:-]*)([^>]*)(?:>|\Z)")
_DECLARATION_RE = re.compile(r"<[!?][^>]*(?:>|\Z)")


def strip_tags(text: str, allowed: Iterable[str] = ()) -> str:
    """Remove every tag whose name is not in ``allowed``, keeping inner text.

    Allowed tags are kept verbatim, attributes included. Comments, doctypes and
    processing instructions are always removed. A ``<`` that does not open a
    tag name (``a < b``) is left alone.
    """
    allowed_names = frozenset(name.lower() for name in allowed)
    text = _COMMENT_RE.sub("", text)
    text = _DECLARATION_RE.sub("", text)

    def _keep_or_drop(match: re.Match[str]) -> str:
        if match.group(2).lower() in allowed_names:
            return match.group(0)
        return ""

    return _TAG_RE.sub(_keep_or_drop, text)
