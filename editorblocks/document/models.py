"""Pydantic models for the editor document envelope."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Block(BaseModel):
    """One content block.

    ``data`` is kept as the raw JSON value; only the handler registered for
    ``type`` knows its schema and decodes it.
    """

    model_config = ConfigDict(frozen=True)

    type: str = ""
    data: Any = None


class Document(BaseModel):
    """An ordered sequence of blocks. Extra top-level keys are ignored."""

    model_config = ConfigDict(frozen=True)

    blocks: list[Block] = Field(...)
