"""Header blocks."""

from __future__ import annotations

from editorblocks.document.models import Block
from editorblocks.handlers.base import BlockHandler
from editorblocks.handlers.models import HeaderData


class HeaderHandler(BlockHandler[HeaderData]):
    block_type = "header"
    payload_model = HeaderData

    def render_html(self, block: Block) -> str:
        header = self.decode(block)
        return f"<h{header.level}>{header.text}</h{header.level}>"

    def render_markdown(self, block: Block) -> str:
        header = self.decode(block)
        return f"{'#' * header.level} {header.text}"
