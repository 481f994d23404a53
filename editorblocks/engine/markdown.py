"""Markdown conversion engine."""

from __future__ import annotations

from editorblocks.document.models import Block
from editorblocks.engine.base import BlockEngine
from editorblocks.handlers.base import MarkdownBlockHandler


class MarkdownEngine(BlockEngine):
    """Creates Markdown from editor documents using the registered handlers."""

    capability = MarkdownBlockHandler
    target = "markdown"

    def _render(self, handler: MarkdownBlockHandler, block: Block) -> str:
        return handler.render_markdown(block)
