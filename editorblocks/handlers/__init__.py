"""Built-in block handlers and the handler capability protocols."""

from editorblocks.handlers.base import BlockHandler, HTMLBlockHandler, MarkdownBlockHandler
from editorblocks.handlers.code import CodeBoxHandler
from editorblocks.handlers.header import HeaderHandler
from editorblocks.handlers.image import ImageHandler
from editorblocks.handlers.lists import ListHandler
from editorblocks.handlers.paragraph import ParagraphHandler
from editorblocks.handlers.raw import RawHTMLHandler
from editorblocks.handlers.sanitize import clean_code, strip_tags, tag_tokens

__all__ = [
    "BlockHandler",
    "CodeBoxHandler",
    "HTMLBlockHandler",
    "HeaderHandler",
    "ImageHandler",
    "ListHandler",
    "MarkdownBlockHandler",
    "ParagraphHandler",
    "RawHTMLHandler",
    "clean_code",
    "strip_tags",
    "tag_tokens",
]
