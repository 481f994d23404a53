"""HTML conversion engine."""

from __future__ import annotations

from editorblocks.document.models import Block
from editorblocks.engine.base import BlockEngine
from editorblocks.handlers.base import HTMLBlockHandler


class HTMLEngine(BlockEngine):
    """Creates HTML from editor documents using the registered handlers."""

    capability = HTMLBlockHandler
    target = "html"

    def _render(self, handler: HTMLBlockHandler, block: Block) -> str:
        return handler.render_html(block)
