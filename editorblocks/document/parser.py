"""Top-level document parsing."""

from __future__ import annotations

from pydantic import ValidationError

from editorblocks.document.models import Document
from editorblocks.errors import ParseError


def parse_document(text: str | bytes) -> Document:
    """Parse the ``{"blocks": [...]}`` envelope.

    Block payloads are left undecoded. Raises ParseError for anything that
    is not a well-formed envelope, including the empty string.
    """
    try:
        return Document.model_validate_json(text)
    except ValidationError as exc:
        raise ParseError(exc) from exc
