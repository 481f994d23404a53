"""Image blocks."""

from __future__ import annotations

from editorblocks.config.models import ImageConfig
from editorblocks.document.models import Block
from editorblocks.handlers.base import BlockHandler
from editorblocks.handlers.models import ImageData


class ImageHandler(BlockHandler[ImageData]):
    """Renders image blocks.

    The CSS classes applied for the stretched/border/background flags come
    from ``config`` and are fixed for the lifetime of the handler. Markdown
    has no way to express those flags, so decorated images are rendered as
    HTML there too.
    """

    block_type = "image"
    payload_model = ImageData

    def __init__(self, config: ImageConfig | None = None) -> None:
        self.config = config or ImageConfig()

    def render_html(self, block: Block) -> str:
        return self._html(self.decode(block))

    def render_markdown(self, block: Block) -> str:
        image = self.decode(block)
        if image.decorated:
            return self._html(image)
        return f'![alt text]({image.file.url} "{image.caption}")'

    def _classes(self, image: ImageData) -> list[str]:
        classes = []
        if image.stretched:
            classes.append(self.config.stretched_class)
        if image.with_border:
            classes.append(self.config.border_class)
        if image.with_background:
            classes.append(self.config.background_class)
        return classes

    def _html(self, image: ImageData) -> str:
        classes = self._classes(image)
        class_attr = f'class="{" ".join(classes)}"' if classes else ""
        return f'<img src="{image.file.url}" alt="{image.caption}" {class_attr}/>'
