"""Code blocks (the ``codeBox`` editor plugin)."""

from __future__ import annotations

from editorblocks.document.models import Block
from editorblocks.handlers.base import BlockHandler
from editorblocks.handlers.models import CodeBoxData
from editorblocks.handlers.sanitize import clean_code


class CodeBoxHandler(BlockHandler[CodeBoxData]):
    """Renders code verbatim for HTML and as a fenced block for Markdown.

    The HTML output keeps the code untouched since the editor stores it as
    markup already. For Markdown the editor's formatting tags are stripped
    first, see :func:`~editorblocks.handlers.sanitize.clean_code`.
    """

    block_type = "codeBox"
    payload_model = CodeBoxData

    def render_html(self, block: Block) -> str:
        data = self.decode(block)
        return f'<pre><code class="{data.language}">{data.code}</code></pre>'

    def render_markdown(self, block: Block) -> str:
        data = self.decode(block)
        return f"```{data.language}\n{clean_code(data.code)}\n```"
