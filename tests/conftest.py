"""Shared test fixtures for editorblocks."""

import json

import pytest

from editorblocks.config.models import EditorBlocksConfig
from editorblocks.engine import HTMLEngine, MarkdownEngine, default_handlers


def _make_document(*blocks: tuple[str, object]) -> str:
    doc = {"time": 1700000000000, "version": "2.28.0"}
    doc["blocks"] = [{"type": t, "data": d} for t, d in blocks]
    return json.dumps(doc)


@pytest.fixture
def make_document():
    """Serialize (type, data) pairs into an editor JSON document."""
    return _make_document


@pytest.fixture
def sample_config():
    return EditorBlocksConfig()


@pytest.fixture
def html_engine(sample_config):
    engine = HTMLEngine()
    engine.register_handlers(*default_handlers(sample_config))
    return engine


@pytest.fixture
def markdown_engine(sample_config):
    engine = MarkdownEngine()
    engine.register_handlers(*default_handlers(sample_config))
    return engine


@pytest.fixture
def sample_document():
    """A document touching every built-in block type."""
    return _make_document(
        ("header", {"text": "Release notes", "level": 2}),
        ("paragraph", {"text": "Highlights below.", "alignment": "left"}),
        ("list", {"style": "unordered", "items": ["faster", "smaller"]}),
        ("codeBox", {"code": "<div>x = 1</div>", "language": "python"}),
        ("raw", {"html": "<hr/>"}),
        ("image", {"file": {"url": "https://cdn.example.com/a.png"}, "caption": "Chart"}),
    )


@pytest.fixture
def sample_document_file(tmp_path, sample_document):
    path = tmp_path / "post.json"
    path.write_text(sample_document, encoding="utf-8")
    return path
