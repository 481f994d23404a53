"""Editor document model and envelope parsing."""

from editorblocks.document.models import Block, Document
from editorblocks.document.parser import parse_document

__all__ = ["Block", "Document", "parse_document"]
