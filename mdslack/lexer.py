"""Markdown tokenizer adapter.

Runs mistune v3's AST renderer and normalizes its token dicts into the
node dataclasses from ``mdslack.nodes``. Token types mdslack has no
converter for (footnotes, math, ...) are dropped here.
"""

import mistune

from .nodes import (
    Blockquote, Code, CodeSpan, Emphasis, Heading, Html, Image, InlineHtml, LineBreak,
    Link, List, ListItem, Paragraph, Strikethrough, Strong, Table, TableCell, Text, ThematicBreak,
)

_markdown = mistune.create_markdown(
    renderer="ast",
    plugins=["strikethrough", "table", "task_lists"],
)


def tokenize(text: str) -> list:
    """Parse markdown text into top-level document nodes."""
    tokens = _markdown(text)
    if isinstance(tokens, str):
        return []
    return normalize_blocks(tokens)


def normalize_blocks(tokens: list[dict]) -> list:
    nodes = []
    for token in tokens:
        node = _normalize_block(token)
        if node is not None:
            nodes.append(node)
    return nodes


def _normalize_block(token: dict):
    t = token.get("type")
    attrs = token.get("attrs") or {}

    if t == "heading":
        return Heading(depth=attrs.get("level", 1), children=normalize_inline(token.get("children", [])))
    if t in ("paragraph", "block_text"):
        return Paragraph(children=normalize_inline(token.get("children", [])))
    if t == "block_code":
        # mistune keeps the final newline of the fence body
        text = token.get("raw", "")
        if text.endswith("\n"):
            text = text[:-1]
        info = (attrs.get("info") or "").strip()
        return Code(text=text, lang=info.split()[0] if info else None)
    if t == "list":
        return List(
            items=[_normalize_list_item(child) for child in token.get("children", [])],
            ordered=bool(attrs.get("ordered")),
            start=attrs.get("start"),
        )
    if t == "table":
        return _normalize_table(token)
    if t == "block_quote":
        return Blockquote(children=normalize_blocks(token.get("children", [])))
    if t == "thematic_break":
        return ThematicBreak()
    if t == "block_html":
        return Html(raw=token.get("raw", ""))
    return None


def _normalize_list_item(token: dict) -> ListItem:
    checked = None
    if token.get("type") == "task_list_item":
        checked = bool((token.get("attrs") or {}).get("checked"))

    children = token.get("children", [])
    first = children[0] if children else None
    if first and first.get("type") in ("block_text", "paragraph") and first.get("children"):
        return ListItem(text=_raw_text(first), children=normalize_inline(first["children"]), checked=checked)
    text = _raw_text(first) if first else ""
    if text.endswith("\n"):
        text = text[:-1]
    return ListItem(text=text, checked=checked)


def _normalize_table(token: dict) -> Table:
    table = Table()
    for part in token.get("children", []):
        if part.get("type") == "table_head":
            table.header = [_normalize_cell(cell) for cell in part.get("children", [])]
        elif part.get("type") == "table_body":
            table.rows = [
                [_normalize_cell(cell) for cell in row.get("children", [])]
                for row in part.get("children", [])
            ]
    return table


def _normalize_cell(token: dict) -> TableCell:
    return TableCell(children=normalize_inline(token.get("children", [])))


def normalize_inline(tokens: list[dict]) -> list:
    nodes = []
    for token in tokens:
        node = _normalize_inline(token)
        if node is not None:
            nodes.append(node)
    return nodes


def _normalize_inline(token: dict):
    t = token.get("type")
    attrs = token.get("attrs") or {}

    if t == "text":
        return Text(token.get("raw", ""))
    if t == "softbreak":
        return Text("\n")
    if t == "linebreak":
        return LineBreak()
    if t == "codespan":
        return CodeSpan(token.get("raw", ""))
    if t == "inline_html":
        return InlineHtml(token.get("raw", ""))
    if t == "emphasis":
        return Emphasis(children=normalize_inline(token.get("children", [])))
    if t == "strong":
        return Strong(children=normalize_inline(token.get("children", [])))
    if t == "strikethrough":
        return Strikethrough(children=normalize_inline(token.get("children", [])))
    if t == "link":
        return Link(
            href=attrs.get("url", ""),
            children=normalize_inline(token.get("children", [])),
            title=attrs.get("title"),
        )
    if t == "image":
        return Image(
            href=attrs.get("url", ""),
            text=_raw_text(token),
            title=attrs.get("title"),
        )
    return None


def _raw_text(token: dict) -> str:
    """Source-ish text of a token subtree, used as a fallback label."""
    if "raw" in token:
        return token["raw"]
    if token.get("type") == "softbreak":
        return "\n"
    return "".join(_raw_text(child) for child in token.get("children", []))
