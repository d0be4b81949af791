"""Phrasing content to Slack text.

Slack's mrkdwn is a limited markup dialect, not markdown:
  *bold*, _italic_, ~strikethrough~, `inline code`, <url|link text>

Headers only accept plain text, so there is a second reducer that drops
all formatting.
"""

from .nodes import CONTAINER_TYPES


def plain_text(node) -> list[str]:
    """Flatten a phrasing node to unformatted text fragments.

    Line breaks contribute nothing; images contribute their title, or
    their URL when they have no title.
    """
    node_type = getattr(node, "type", None)

    if node_type in CONTAINER_TYPES:
        return [fragment for child in node.children for fragment in plain_text(child)]
    if node_type == "br":
        return []
    if node_type == "image":
        return [node.title or node.href]
    if node_type in ("codespan", "text", "html"):
        return [node.raw]
    return []


def mrkdwn(node) -> str:
    """Render a non-image phrasing node as mrkdwn.

    Links keep a trailing space so Slack does not glue the closing ``>``
    to the next word. Unknown nodes (line breaks, inline HTML) render as
    an empty string.
    """
    node_type = getattr(node, "type", None)

    if node_type == "link":
        return f"<{node.href}|{_inner(node)}> "
    if node_type == "em":
        return f"_{_inner(node)}_"
    if node_type == "strong":
        return f"*{_inner(node)}*"
    if node_type == "del":
        return f"~{_inner(node)}~"
    if node_type == "codespan":
        return f"`{node.text}`"
    if node_type == "text":
        return node.text
    return ""


def _inner(node) -> str:
    return "".join(mrkdwn(child) for child in node.children)


def cell_text(node) -> str:
    """Render one table-cell fragment.

    Images cannot live inside a code fence, so they degrade to their URL,
    then title, then alt text.
    """
    if getattr(node, "type", None) == "image":
        return node.href or node.title or node.text or "image"
    return mrkdwn(node)
