"""Pydantic payload schemas, one per built-in block type.

Fields use pydantic's strict types: a payload whose values have the wrong
JSON type fails to decode instead of being coerced (``"3"`` is not a
header level, ``"yes"`` is not a flag).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr


class HeaderData(BaseModel):
    text: StrictStr
    level: StrictInt = Field(ge=1, le=6)


class ParagraphData(BaseModel):
    text: StrictStr
    alignment: StrictStr = "left"


class ListData(BaseModel):
    style: StrictStr = "unordered"
    items: list[StrictStr]

    @property
    def ordered(self) -> bool:
        return self.style == "ordered"


class CodeBoxData(BaseModel):
    code: StrictStr
    language: StrictStr = ""


class RawData(BaseModel):
    html: StrictStr


class ImageFile(BaseModel):
    url: StrictStr


class ImageData(BaseModel):
    """Payload of an image block. Flags are read from the editor's camelCase keys only."""

    file: ImageFile
    caption: StrictStr = ""
    with_border: StrictBool = Field(default=False, alias="withBorder")
    with_background: StrictBool = Field(default=False, alias="withBackground")
    stretched: StrictBool = False

    @property
    def decorated(self) -> bool:
        return self.stretched or self.with_border or self.with_background
