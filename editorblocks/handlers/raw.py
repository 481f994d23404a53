"""Raw HTML blocks, passed through untouched."""

from __future__ import annotations

from editorblocks.document.models import Block
from editorblocks.handlers.base import BlockHandler
from editorblocks.handlers.models import RawData


class RawHTMLHandler(BlockHandler[RawData]):
    block_type = "raw"
    payload_model = RawData

    def render_html(self, block: Block) -> str:
        return self.decode(block).html

    def render_markdown(self, block: Block) -> str:
        # Markdown allows inline HTML, so the same passthrough applies.
        return self.decode(block).html
