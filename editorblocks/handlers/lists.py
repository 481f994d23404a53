"""List blocks."""

from __future__ import annotations

from editorblocks.document.models import Block
from editorblocks.handlers.base import BlockHandler
from editorblocks.handlers.models import ListData


class ListHandler(BlockHandler[ListData]):
    block_type = "list"
    payload_model = ListData

    def render_html(self, block: Block) -> str:
        data = self.decode(block)
        tag = "ol" if data.ordered else "ul"
        items = "".join(f"<li>{item}</li>" for item in data.items)
        return f"<{tag}>{items}</{tag}>"

    def render_markdown(self, block: Block) -> str:
        data = self.decode(block)
        prefix = "1. " if data.ordered else "- "
        return "\n".join(prefix + item for item in data.items)
