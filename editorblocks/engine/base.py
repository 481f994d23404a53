"""Shared dispatch loop for the HTML and Markdown engines."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from editorblocks.document.models import Block
from editorblocks.document.parser import parse_document
from editorblocks.errors import ConversionError, DecodeError, HandlerNotFoundError

logger = logging.getLogger(__name__)


class BlockEngine(ABC):
    """Converts an editor document by dispatching each block to its handler.

    The registry has a two-phase lifecycle: register handlers once during
    setup, then call :meth:`convert` as often as needed. ``convert`` only
    reads the registry, so concurrent conversions are safe as long as no
    thread calls :meth:`register_handlers` at the same time. Registration
    itself is not synchronized.
    """

    #: Protocol a handler must satisfy to be registered with this engine.
    capability: type
    #: Target format name, used in log messages.
    target: str

    def __init__(self) -> None:
        self._handlers: dict[str, Any] = {}

    @property
    def handlers(self) -> Mapping[str, Any]:
        """Read-only view of the registry, keyed by block type tag."""
        return MappingProxyType(self._handlers)

    def register_handlers(self, *handlers: Any) -> None:
        """Register handlers by their ``block_type``; later ones win."""
        for handler in handlers:
            if not isinstance(handler, self.capability):
                raise TypeError(
                    f"{handler!r} cannot render {self.target}: "
                    f"expected a {self.capability.__name__}"
                )
            previous = self._handlers.get(handler.block_type)
            if previous is not None:
                logger.debug(
                    "replacing %s handler for %r: %r -> %r",
                    self.target, handler.block_type, previous, handler,
                )
            self._handlers[handler.block_type] = handler

    def convert(self, text: str | bytes) -> str:
        """Render a whole document.

        Fails fast: the first parse, lookup or render error aborts the
        conversion and propagates to the caller. ConversionErrors raised
        while walking the blocks carry the output rendered so far in
        ``partial_output``.
        """
        document = parse_document(text)
        parts: list[str] = []
        for index, block in enumerate(document.blocks):
            handler = self._handlers.get(block.type)
            if handler is None:
                exc = HandlerNotFoundError(block.type, index)
                exc.partial_output = "".join(parts)
                raise exc
            try:
                parts.append(self._render(handler, block))
            except DecodeError as exc:
                exc.index = index
                exc.partial_output = "".join(parts)
                raise
            except ConversionError as exc:
                exc.partial_output = "".join(parts)
                raise

        logger.debug(
            "converted %d blocks to %s", len(document.blocks), self.target
        )
        return "".join(parts)

    @abstractmethod
    def _render(self, handler: Any, block: Block) -> str:
        """Invoke the engine's capability on ``handler``."""
        ...
