"""Exception types raised while converting editor documents."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every failure raised by a conversion.

    ``partial_output`` holds the fragments rendered before the failure when
    the error was raised during the block walk. It is informational only;
    a raised error always means the conversion did not complete.
    """

    partial_output: str = ""


class ParseError(ConversionError):
    """The input is not a well-formed editor document envelope."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Invalid editor document: {cause}")
        self.__cause__ = cause


class DecodeError(ConversionError):
    """A block payload does not match its handler's schema."""

    def __init__(
        self, block_type: str, cause: Exception, index: int | None = None
    ) -> None:
        self.block_type = block_type
        self.cause = cause
        self.index = index
        super().__init__(block_type, cause)
        self.__cause__ = cause

    def __str__(self) -> str:
        where = f"block {self.index} " if self.index is not None else ""
        return f"Cannot decode {where}of type {self.block_type!r}: {self.cause}"


class HandlerNotFoundError(ConversionError):
    """No handler is registered for a block's type tag."""

    def __init__(self, block_type: str, index: int | None = None) -> None:
        self.block_type = block_type
        self.index = index
        msg = f"Handler not found for block type {block_type!r}"
        if index is not None:
            msg += f" (block {index})"
        super().__init__(msg)
