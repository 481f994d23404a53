"""Discovery and loading of third-party block handlers via entry points."""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from editorblocks.config.models import EditorBlocksConfig

logger = logging.getLogger(__name__)


class PluginNotFoundError(Exception):
    """Raised when a requested handler plugin cannot be found."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No handler plugin found with name '{name}'")


class HandlerLoader:
    """Loads block handlers registered under the ``editorblocks.handlers`` group.

    An entry point may point at a handler class, which is instantiated with
    no arguments, or at a ready-made handler instance.
    """

    GROUP = "editorblocks.handlers"

    def __init__(self, config: EditorBlocksConfig):
        self._config = config

    def discover(self) -> list[str]:
        """Return the names of every installed handler plugin."""
        eps = importlib.metadata.entry_points(group=self.GROUP)
        return sorted(ep.name for ep in eps)

    def load(self, name: str) -> object:
        """Load and instantiate a single named handler plugin."""
        eps = importlib.metadata.entry_points(group=self.GROUP)
        for ep in eps:
            if ep.name == name:
                target = ep.load()
                handler = target() if isinstance(target, type) else target
                logger.info("loaded handler plugin %s (%r)", name, handler)
                return handler
        raise PluginNotFoundError(name)

    def load_configured(self) -> list[object]:
        """Load every plugin named in ``config.plugins.handlers``, in order."""
        return [self.load(name) for name in self._config.plugins.handlers]
