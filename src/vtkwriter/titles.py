from __future__ import annotations

import re
import unicodedata

PLACEHOLDER_TITLE = "<no title provided>"
MAX_TITLE_LENGTH = 254
TRUNCATED_LENGTH = 250
ELLIPSIS = "..."

# line breaks and other control characters would end the title line early
_CONTROL_RUN = re.compile(r"[\x00-\x1f\x7f]+")


def _to_ascii(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.encode("ascii", errors="replace").decode("ascii")


def sanitize_title(title: str | None) -> str:
    """Return a title that fits the second line of a legacy VTK file.

    The result is a single ASCII line: control characters collapse to one
    space and letters with accents lose them; anything else becomes "?".
    """

    cleaned = _CONTROL_RUN.sub(" ", _to_ascii(title or "")).strip()
    if not cleaned:
        return PLACEHOLDER_TITLE
    if len(cleaned) <= MAX_TITLE_LENGTH:
        return cleaned
    return cleaned[:TRUNCATED_LENGTH] + ELLIPSIS


def sanitize_field_name(name: str | None) -> str:
    return "_".join(_to_ascii(name or "").split())
