"""Tests for the built-in block handlers."""

import pytest

from editorblocks.config.models import ImageConfig
from editorblocks.document.models import Block
from editorblocks.errors import DecodeError
from editorblocks.handlers import (
    CodeBoxHandler,
    HTMLBlockHandler,
    HeaderHandler,
    ImageHandler,
    ListHandler,
    MarkdownBlockHandler,
    ParagraphHandler,
    RawHTMLHandler,
)


def make_block(block_type, data):
    return Block(type=block_type, data=data)


# ---------------------------------------------------------------------------
# Type tags and capabilities
# ---------------------------------------------------------------------------


class TestHandlerTypes:
    @pytest.mark.parametrize(
        "handler, block_type",
        [
            (HeaderHandler(), "header"),
            (ParagraphHandler(), "paragraph"),
            (ListHandler(), "list"),
            (CodeBoxHandler(), "codeBox"),
            (RawHTMLHandler(), "raw"),
            (ImageHandler(), "image"),
        ],
    )
    def test_block_type(self, handler, block_type):
        assert handler.block_type == block_type

    @pytest.mark.parametrize(
        "handler",
        [HeaderHandler(), ParagraphHandler(), ListHandler(), CodeBoxHandler(), RawHTMLHandler(), ImageHandler()],
    )
    def test_builtins_support_both_capabilities(self, handler):
        assert isinstance(handler, HTMLBlockHandler)
        assert isinstance(handler, MarkdownBlockHandler)


# ---------------------------------------------------------------------------
# header
# ---------------------------------------------------------------------------


class TestHeaderHandler:
    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_html(self, level):
        block = make_block("header", {"text": "Heading", "level": level})
        assert HeaderHandler().render_html(block) == f"<h{level}>Heading</h{level}>"

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_markdown(self, level):
        block = make_block("header", {"text": "Heading", "level": level})
        assert HeaderHandler().render_markdown(block) == "#" * level + " Heading"

    @pytest.mark.parametrize(
        "data",
        [
            {"text": "Heading", "level": "abc"},
            {"text": "Heading", "level": 7},
            {"text": "Heading", "level": 0},
            {"text": "Heading"},
            {"level": 2},
            None,
            "Heading",
        ],
    )
    def test_bad_payload_raises_decode_error(self, data):
        with pytest.raises(DecodeError) as exc_info:
            HeaderHandler().render_html(make_block("header", data))
        assert exc_info.value.block_type == "header"
        assert exc_info.value.index is None

    def test_decode_error_raised_for_markdown_too(self):
        with pytest.raises(DecodeError):
            HeaderHandler().render_markdown(make_block("header", {"text": "x", "level": "x"}))


# ---------------------------------------------------------------------------
# paragraph
# ---------------------------------------------------------------------------


class TestParagraphHandler:
    def test_html_left(self):
        block = make_block("paragraph", {"text": "paragraph", "alignment": "left"})
        assert ParagraphHandler().render_html(block) == "<p>paragraph</p>"

    @pytest.mark.parametrize("alignment", ["center", "right", "justify"])
    def test_html_aligned(self, alignment):
        block = make_block("paragraph", {"text": "paragraph", "alignment": alignment})
        expected = f'<p style="text-align:{alignment}">paragraph</p>'
        assert ParagraphHandler().render_html(block) == expected

    def test_markdown_left_is_plain_text(self):
        block = make_block("paragraph", {"text": "p", "alignment": "left"})
        assert ParagraphHandler().render_markdown(block) == "p"

    def test_markdown_aligned_falls_back_to_html(self):
        block = make_block("paragraph", {"text": "p", "alignment": "center"})
        handler = ParagraphHandler()
        assert handler.render_markdown(block) == '<p style="text-align:center">p</p>'
        assert handler.render_markdown(block) == handler.render_html(block)

    def test_alignment_defaults_to_left(self):
        block = make_block("paragraph", {"text": "p"})
        assert ParagraphHandler().render_html(block) == "<p>p</p>"
        assert ParagraphHandler().render_markdown(block) == "p"

    def test_inline_markup_not_escaped(self):
        block = make_block("paragraph", {"text": "a <b>bold</b> move"})
        assert ParagraphHandler().render_html(block) == "<p>a <b>bold</b> move</p>"

    def test_missing_text(self):
        with pytest.raises(DecodeError):
            ParagraphHandler().render_html(make_block("paragraph", {"alignment": "left"}))


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


class TestListHandler:
    @pytest.mark.parametrize(
        "style, expected",
        [
            ("ordered", "<ol><li>one</li><li>two</li><li>three</li></ol>"),
            ("unordered", "<ul><li>one</li><li>two</li><li>three</li></ul>"),
            ("bulleted", "<ul><li>one</li><li>two</li><li>three</li></ul>"),
        ],
    )
    def test_html(self, style, expected):
        block = make_block("list", {"style": style, "items": ["one", "two", "three"]})
        assert ListHandler().render_html(block) == expected

    @pytest.mark.parametrize(
        "style, expected",
        [
            ("ordered", "1. one\n1. two\n1. three"),
            ("unordered", "- one\n- two\n- three"),
        ],
    )
    def test_markdown(self, style, expected):
        block = make_block("list", {"style": style, "items": ["one", "two", "three"]})
        assert ListHandler().render_markdown(block) == expected

    def test_empty_items(self):
        block = make_block("list", {"style": "ordered", "items": []})
        assert ListHandler().render_html(block) == "<ol></ol>"
        assert ListHandler().render_markdown(block) == ""

    def test_items_must_be_strings(self):
        with pytest.raises(DecodeError):
            ListHandler().render_html(make_block("list", {"style": "ordered", "items": [{"content": "x"}]}))


# ---------------------------------------------------------------------------
# codeBox
# ---------------------------------------------------------------------------


class TestCodeBoxHandler:
    def test_html(self):
        block = make_block(
            "codeBox", {"language": "go", "code": 'func main(){fmt.Println("HelloWorld")}'}
        )
        expected = '<pre><code class="go">func main(){fmt.Println("HelloWorld")}</code></pre>'
        assert CodeBoxHandler().render_html(block) == expected

    def test_html_keeps_markup(self):
        block = make_block("codeBox", {"language": "js", "code": "<div>a</div>"})
        assert CodeBoxHandler().render_html(block) == '<pre><code class="js"><div>a</div></code></pre>'

    def test_markdown_fenced(self):
        block = make_block("codeBox", {"language": "python", "code": "print(1)"})
        assert CodeBoxHandler().render_markdown(block) == "```python\nprint(1)\n```"

    def test_markdown_cleans_editor_markup(self):
        block = make_block(
            "codeBox",
            {"language": "python", "code": "<div>def f():</div><div>    <b>return</b> 1</div>"},
        )
        assert CodeBoxHandler().render_markdown(block) == "```python\n\ndef f():\n    return 1\n```"

    def test_language_optional(self):
        block = make_block("codeBox", {"code": "x"})
        assert CodeBoxHandler().render_markdown(block) == "```\nx\n```"


# ---------------------------------------------------------------------------
# raw
# ---------------------------------------------------------------------------


class TestRawHTMLHandler:
    def test_passthrough(self):
        html = '<div class="embed"><iframe src="https://example.com"></iframe></div>'
        block = make_block("raw", {"html": html})
        assert RawHTMLHandler().render_html(block) == html
        assert RawHTMLHandler().render_markdown(block) == html

    def test_missing_html(self):
        with pytest.raises(DecodeError):
            RawHTMLHandler().render_markdown(make_block("raw", {}))


# ---------------------------------------------------------------------------
# image
# ---------------------------------------------------------------------------


def _image(**flags):
    return make_block(
        "image",
        {"file": {"url": "https://cdn.example.com/cat.png"}, "caption": "A cat", **flags},
    )


class TestImageHandler:
    def test_html_plain(self):
        assert ImageHandler().render_html(_image()) == (
            '<img src="https://cdn.example.com/cat.png" alt="A cat" />'
        )

    def test_markdown_plain(self):
        assert ImageHandler().render_markdown(_image()) == (
            '![alt text](https://cdn.example.com/cat.png "A cat")'
        )

    def test_html_with_default_classes(self):
        html = ImageHandler().render_html(_image(stretched=True, withBorder=True, withBackground=True))
        assert html == (
            '<img src="https://cdn.example.com/cat.png" alt="A cat" '
            'class="image-tool--stretched image-tool--withBorder image-tool--withBackground"/>'
        )

    def test_html_single_class(self):
        html = ImageHandler().render_html(_image(withBorder=True))
        assert 'class="image-tool--withBorder"/>' in html

    def test_markdown_decorated_falls_back_to_html(self):
        handler = ImageHandler()
        block = _image(stretched=True)
        assert handler.render_markdown(block) == handler.render_html(block)

    def test_configured_classes(self):
        config = ImageConfig(stretched_class="wide", border_class="framed", background_class="tinted")
        handler = ImageHandler(config)
        html = handler.render_html(_image(stretched=True, withBackground=True))
        assert 'class="wide tinted"/>' in html

    def test_false_flags_ignored(self):
        html = ImageHandler().render_html(_image(stretched=False, withBorder=False))
        assert "class=" not in html

    def test_missing_file_url(self):
        with pytest.raises(DecodeError):
            ImageHandler().render_html(make_block("image", {"file": {}, "caption": "x"}))

    def test_config_resolved_at_construction(self):
        handler = ImageHandler()
        assert handler.config == ImageConfig()

    def test_snake_case_flags_are_not_wire_keys(self):
        html = ImageHandler().render_html(_image(with_border=True, with_background=True))
        assert "class=" not in html


# ---------------------------------------------------------------------------
# payload types
# ---------------------------------------------------------------------------


class TestPayloadTypesNotCoerced:
    @pytest.mark.parametrize(
        "handler, block_type, data",
        [
            (HeaderHandler(), "header", {"text": "H", "level": "3"}),
            (HeaderHandler(), "header", {"text": "H", "level": True}),
            (HeaderHandler(), "header", {"text": "H", "level": 2.5}),
            (HeaderHandler(), "header", {"text": 5, "level": 2}),
            (ParagraphHandler(), "paragraph", {"text": ["p"]}),
            (ListHandler(), "list", {"style": "ordered", "items": [1]}),
            (CodeBoxHandler(), "codeBox", {"code": 10, "language": "go"}),
            (RawHTMLHandler(), "raw", {"html": None}),
            (ImageHandler(), "image", {"file": {"url": "u"}, "withBorder": "yes"}),
            (ImageHandler(), "image", {"file": {"url": "u"}, "stretched": 1}),
            (ImageHandler(), "image", {"file": {"url": 7}}),
        ],
    )
    def test_wrong_json_type_raises_decode_error(self, handler, block_type, data):
        block = make_block(block_type, data)
        with pytest.raises(DecodeError) as exc_info:
            handler.render_html(block)
        assert exc_info.value.block_type == block_type
        with pytest.raises(DecodeError):
            handler.render_markdown(block)
