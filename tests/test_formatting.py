"""Tests for the plain-text and mrkdwn reducers."""

from mdslack.formatting import cell_text, mrkdwn, plain_text
from mdslack.nodes import (
    CodeSpan, Emphasis, Image, InlineHtml, LineBreak, Link, Strikethrough, Strong, Text,
)


# ── mrkdwn ───────────────────────────────────────────────────

class TestMrkdwn:
    def test_text_unchanged(self):
        assert mrkdwn(Text("plain *stars*")) == "plain *stars*"

    def test_emphasis(self):
        assert mrkdwn(Emphasis([Text("it")])) == "_it_"

    def test_strong(self):
        assert mrkdwn(Strong([Text("bold")])) == "*bold*"

    def test_strikethrough(self):
        assert mrkdwn(Strikethrough([Text("gone")])) == "~gone~"

    def test_codespan(self):
        assert mrkdwn(CodeSpan("x = 1")) == "`x = 1`"

    def test_link_keeps_trailing_space(self):
        link = Link("https://example.com", [Text("site")])
        assert mrkdwn(link) == "<https://example.com|site> "

    def test_nested_containers(self):
        node = Strong([Text("a "), Emphasis([Strikethrough([Text("b")])])])
        assert mrkdwn(node) == "*a _~b~_*"

    def test_link_with_formatted_label(self):
        link = Link("https://x.io", [Strong([Text("go")])])
        assert mrkdwn(link) == "<https://x.io|*go*> "

    def test_deep_nesting(self):
        node = Text("core")
        for _ in range(200):
            node = Emphasis([node])
        assert mrkdwn(node) == "_" * 200 + "core" + "_" * 200

    def test_line_break_renders_empty(self):
        assert mrkdwn(LineBreak()) == ""

    def test_inline_html_renders_empty(self):
        assert mrkdwn(InlineHtml("<span>")) == ""

    def test_unknown_object_renders_empty(self):
        assert mrkdwn(object()) == ""


# ── plain text ───────────────────────────────────────────────

class TestPlainText:
    def test_strips_formatting(self):
        node = Strong([Text("Big "), Emphasis([Text("title")])])
        assert "".join(plain_text(node)) == "Big title"

    def test_link_keeps_label_only(self):
        assert plain_text(Link("https://x.io", [Text("label")])) == ["label"]

    def test_line_break_dropped(self):
        assert plain_text(LineBreak()) == []

    def test_image_uses_title(self):
        assert plain_text(Image("https://x/y.png", "alt", "Title")) == ["Title"]

    def test_image_falls_back_to_url(self):
        assert plain_text(Image("https://x/y.png", "alt")) == ["https://x/y.png"]

    def test_codespan_keeps_backticks(self):
        assert plain_text(CodeSpan("x")) == ["`x`"]

    def test_inline_html_raw(self):
        assert plain_text(InlineHtml("<b>")) == ["<b>"]

    def test_unknown_node(self):
        assert plain_text(None) == []


# ── table cells ──────────────────────────────────────────────

class TestCellText:
    def test_image_prefers_url(self):
        assert cell_text(Image("https://x/y.png", "alt", "T")) == "https://x/y.png"

    def test_image_falls_back_to_title_then_alt(self):
        assert cell_text(Image("", "alt", "T")) == "T"
        assert cell_text(Image("", "alt")) == "alt"
        assert cell_text(Image("")) == "image"

    def test_text_uses_mrkdwn(self):
        assert cell_text(Strong([Text("x")])) == "*x*"
