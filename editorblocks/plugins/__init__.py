"""Dynamic discovery of third-party block handlers."""

from editorblocks.plugins.loader import HandlerLoader, PluginNotFoundError

__all__ = ["HandlerLoader", "PluginNotFoundError"]
