"""YAML config discovery and validation."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import EditorBlocksConfig

logger = logging.getLogger(__name__)


def load_config(cli_path: str | None = None) -> EditorBlocksConfig:
    """Load the first config found: CLI path > ./editorblocks.yaml > ~/.editorblocks/config.yaml.

    An explicit ``cli_path`` must exist. Empty files are skipped and the
    search continues; when nothing is found the defaults are returned.
    Raises ``ValueError`` naming the file and the offending keys.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in _search_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            logger.debug("skipping empty config file %s", path)
            continue
        config = _validate(raw, path)
        logger.debug("loaded config from %s", path)
        return config

    return EditorBlocksConfig()


def _search_paths(cli_path: str | None) -> list[Path]:
    paths = [Path("editorblocks.yaml"), Path.home() / ".editorblocks" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def _read_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _validate(raw: object, path: Path) -> EditorBlocksConfig:
    if not isinstance(raw, dict):
        raise ValueError(
            f"Invalid config in {path}: expected a mapping at the top level, "
            f"got {type(raw).__name__}"
        )
    try:
        return EditorBlocksConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {_describe_errors(e)}") from e


def _describe_errors(exc: ValidationError) -> str:
    """One ``dotted.key: message`` entry per validation error."""
    parts = []
    for err in exc.errors():
        key = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{key}: {err['msg']}")
    return "; ".join(parts)


# Default YAML template for `editorblocks config init`
DEFAULT_CONFIG_TEMPLATE = """\
# editorblocks.yaml

# CSS classes applied to decorated image blocks
image:
  stretched_class: "image-tool--stretched"
  border_class: "image-tool--withBorder"
  background_class: "image-tool--withBackground"

# Extra block handlers, by entry point name (group: editorblocks.handlers)
plugins:
  handlers: []

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
