"""Markup cleanup for code pasted from rich-text editors.

Code blocks copied out of a formatted editor often arrive wrapped in
``<div>`` line containers and inline formatting tags (``<b>``, ``<span
style=...>``, ``<br/>``). ``clean_code`` turns that back into plain source:
every ``<div>`` becomes a newline and every other tag is stripped.
"""

from __future__ import annotations

import re

# <, optional closing slash, tag name, optional attributes, optional
# self-closing slash, >.
_TAG_RE = re.compile(r"</?[a-zA-Z][^>]*/?>")

_LINE_BREAK = "<div>"


def tag_tokens(text: str) -> list[str]:
    """Return the distinct tag tokens found in ``text``, longest first."""
    found = {m.group(0) for m in _TAG_RE.finditer(text)}
    return sorted(found, key=lambda t: (-len(t), t))


def strip_tags(text: str) -> str:
    """Remove every tag token from ``text``.

    Tokens are removed at the positions they were matched, so a later
    removal can never eat into text exposed by an earlier one. Text without
    tags is returned unchanged.
    """
    return _TAG_RE.sub("", text)


def clean_code(code: str) -> str:
    """Convert editor ``<div>`` line breaks to newlines and strip the rest."""
    return strip_tags(code.replace(_LINE_BREAK, "\n"))
