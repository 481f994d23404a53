from .loader import load_config
from .models import (
    EditorBlocksConfig,
    ImageConfig,
    PluginsConfig,
)

__all__ = [
    "EditorBlocksConfig",
    "ImageConfig",
    "PluginsConfig",
    "load_config",
]
