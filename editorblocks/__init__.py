"""Convert block-structured editor documents to HTML and Markdown."""

from editorblocks.document import Block, Document, parse_document
from editorblocks.engine import (
    BlockEngine,
    HTMLEngine,
    MarkdownEngine,
    create_engine,
    default_handlers,
)
from editorblocks.errors import (
    ConversionError,
    DecodeError,
    HandlerNotFoundError,
    ParseError,
)
from editorblocks.handlers import (
    BlockHandler,
    CodeBoxHandler,
    HTMLBlockHandler,
    HeaderHandler,
    ImageHandler,
    ListHandler,
    MarkdownBlockHandler,
    ParagraphHandler,
    RawHTMLHandler,
)

__version__ = "0.1.0"

__all__ = [
    "Block",
    "BlockEngine",
    "BlockHandler",
    "CodeBoxHandler",
    "ConversionError",
    "DecodeError",
    "Document",
    "HTMLBlockHandler",
    "HTMLEngine",
    "HandlerNotFoundError",
    "HeaderHandler",
    "ImageHandler",
    "ListHandler",
    "MarkdownBlockHandler",
    "MarkdownEngine",
    "ParagraphHandler",
    "ParseError",
    "RawHTMLHandler",
    "create_engine",
    "default_handlers",
    "parse_document",
]
