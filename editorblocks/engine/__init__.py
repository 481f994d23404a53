"""Conversion engines and the engine factory."""

from __future__ import annotations

import logging

from editorblocks.config.models import EditorBlocksConfig
from editorblocks.engine.base import BlockEngine
from editorblocks.engine.html import HTMLEngine
from editorblocks.engine.markdown import MarkdownEngine
from editorblocks.handlers import (
    BlockHandler,
    CodeBoxHandler,
    HeaderHandler,
    ImageHandler,
    ListHandler,
    ParagraphHandler,
    RawHTMLHandler,
)
from editorblocks.plugins.loader import HandlerLoader

logger = logging.getLogger(__name__)

_ENGINE_MAP: dict[str, type[BlockEngine]] = {
    "html": HTMLEngine,
    "markdown": MarkdownEngine,
}


def default_handlers(config: EditorBlocksConfig | None = None) -> list[BlockHandler]:
    """Return one instance of every built-in handler."""
    config = config or EditorBlocksConfig()
    return [
        HeaderHandler(),
        ParagraphHandler(),
        ListHandler(),
        CodeBoxHandler(),
        RawHTMLHandler(),
        ImageHandler(config.image),
    ]


def create_engine(
    target: str,
    config: EditorBlocksConfig | None = None,
    loader: HandlerLoader | None = None,
) -> BlockEngine:
    """Build an engine for ``target`` ("html" or "markdown").

    Registers the built-in handlers, then the plugins named in
    ``config.plugins.handlers``, which override built-ins for the same tag.
    """
    cls = _ENGINE_MAP.get(target)
    if cls is None:
        raise ValueError(
            f"Unsupported target format: {target!r}. "
            f"Supported: {', '.join(_ENGINE_MAP)}"
        )
    config = config or EditorBlocksConfig()
    engine = cls()
    engine.register_handlers(*default_handlers(config))

    if config.plugins.handlers:
        loader = loader or HandlerLoader(config)
        engine.register_handlers(*loader.load_configured())

    logger.debug("created %s engine with %d handlers", target, len(engine.handlers))
    return engine


__all__ = [
    "BlockEngine",
    "HTMLEngine",
    "MarkdownEngine",
    "create_engine",
    "default_handlers",
]
