"""Handler capability protocols and the shared handler base class."""

from __future__ import annotations

from typing import ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ValidationError

from editorblocks.document.models import Block
from editorblocks.errors import DecodeError

PayloadT = TypeVar("PayloadT", bound=BaseModel)


@runtime_checkable
class HTMLBlockHandler(Protocol):
    """Renders blocks of one type tag to HTML."""

    block_type: str

    def render_html(self, block: Block) -> str: ...


@runtime_checkable
class MarkdownBlockHandler(Protocol):
    """Renders blocks of one type tag to Markdown."""

    block_type: str

    def render_markdown(self, block: Block) -> str: ...


class BlockHandler(Generic[PayloadT]):
    """Base for the built-in handlers.

    Subclasses set ``block_type`` and ``payload_model`` and implement one or
    both render methods. Handlers hold no per-conversion state, so a single
    instance can serve any number of engines and threads.
    """

    block_type: ClassVar[str]
    payload_model: ClassVar[type[BaseModel]]

    def decode(self, block: Block) -> PayloadT:
        """Validate the block payload against ``payload_model``."""
        try:
            return self.payload_model.model_validate(block.data)  # type: ignore[return-value]
        except ValidationError as exc:
            raise DecodeError(self.block_type, exc) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(block_type={self.block_type!r})"
