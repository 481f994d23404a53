from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class ImageConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    stretched_class: str = "image-tool--stretched"
    border_class: str = "image-tool--withBorder"
    background_class: str = "image-tool--withBackground"


class PluginsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    handlers: list[str] = Field(default_factory=list)


class EditorBlocksConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    image: ImageConfig = Field(default_factory=ImageConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
