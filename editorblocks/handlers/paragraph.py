"""Paragraph blocks."""

from __future__ import annotations

from editorblocks.document.models import Block
from editorblocks.handlers.base import BlockHandler
from editorblocks.handlers.models import ParagraphData


def _paragraph_html(paragraph: ParagraphData) -> str:
    if paragraph.alignment != "left":
        return f'<p style="text-align:{paragraph.alignment}">{paragraph.text}</p>'
    return f"<p>{paragraph.text}</p>"


class ParagraphHandler(BlockHandler[ParagraphData]):
    block_type = "paragraph"
    payload_model = ParagraphData

    def render_html(self, block: Block) -> str:
        return _paragraph_html(self.decode(block))

    def render_markdown(self, block: Block) -> str:
        paragraph = self.decode(block)
        if paragraph.alignment != "left":
            # Markdown has no alignment syntax; fall back to inline HTML.
            return _paragraph_html(paragraph)
        return paragraph.text
