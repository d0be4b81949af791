"""Document tree → Slack blocks.

One converter per top-level node type. Converters that touch images are
async because image URLs are probed before they may become blocks; the
tree walker runs all converters concurrently and restores input order
when concatenating.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .blocks import Block, HeaderBlock, ImageBlock, SectionBlock, divider, header, image, section
from .formatting import cell_text, mrkdwn, plain_text
from .images import HttpProbe, ImageAdmission, Probe
from .rawhtml import parse_html

logger = logging.getLogger("mdslack.parser")

DEFAULT_BULLET = "• "


@dataclass
class ListOptions:
    checkbox_prefix: Optional[Callable[[bool], str]] = None


@dataclass
class ParsingOptions:
    lists: Optional[ListOptions] = None


# ============================================================
# PHRASING CONTENT
# ============================================================

async def parse_phrasing(nodes: list, admission: ImageAdmission) -> list:
    """Fold phrasing nodes into section and image blocks.

    Consecutive non-image nodes merge into one section. An image always
    ends the running section, even when it is rejected and emits nothing,
    so text on both sides of a dropped image stays in two sections.
    """
    blocks: list = []
    current: Optional[SectionBlock] = None

    for node in nodes:
        if getattr(node, "type", None) == "image":
            current = None
            result = await admission.admit(node.href)
            if result.admitted:
                blocks.append(image(node.href, node.text or node.title or node.href, node.title))
        elif current is None:
            current = section(mrkdwn(node))
            blocks.append(current)
        else:
            current.append(mrkdwn(node))

    return blocks


# ============================================================
# BLOCK CONVERTERS
# ============================================================

def parse_heading(node) -> HeaderBlock:
    return header("".join(fragment for child in node.children for fragment in plain_text(child)))


def parse_code(node) -> SectionBlock:
    return section(f"```{node.lang or ''}\n{node.text}\n```")


def parse_list(node, options: Optional[ListOptions] = None) -> SectionBlock:
    options = options or ListOptions()
    lines = []
    number = 0  # only numbered lines advance the counter

    for item in node.items:
        if not item.children:
            lines.append(item.text or "")
            continue

        text = "".join(mrkdwn(child) for child in item.children if child.type != "image")

        if node.ordered:
            number += 1
            lines.append(f"{number}. {text}")
        elif item.checked is not None:
            prefix = options.checkbox_prefix(item.checked) if options.checkbox_prefix else None
            lines.append(f"{prefix if prefix is not None else DEFAULT_BULLET}{text}")
        else:
            lines.append(f"{DEFAULT_BULLET}{text}")

    return section("\n".join(lines))


def _pipe_row(cells: list[str]) -> str:
    return f"| {' | '.join(cells)} |"


def parse_table(node) -> SectionBlock:
    header_cells = [_parse_cell(cell) for cell in node.header]
    rows = [_pipe_row(header_cells), _pipe_row(["---"] * len(header_cells))]
    rows.extend(_pipe_row([_parse_cell(cell) for cell in row]) for row in node.rows)
    return section("```\n" + "\n".join(rows) + "\n```")


def _parse_cell(cell) -> str:
    return " ".join(cell_text(child) for child in cell.children)


async def parse_blockquote(node, admission: ImageAdmission) -> list:
    """Quote multi-line sections; single-line sections are left as-is."""
    blocks = []
    for child in node.children:
        if child.type != "paragraph":
            continue
        for block in await parse_phrasing(child.children, admission):
            if isinstance(block, SectionBlock) and "\n" in block.text:
                block.text = "> " + block.text.replace("\n", "\n> ")
            blocks.append(block)
    return blocks


async def parse_image(node, admission: ImageAdmission) -> list[ImageBlock]:
    result = await admission.admit(node.href)
    if not result.admitted:
        return []
    return [image(node.href, node.text or node.href)]


# ============================================================
# TREE WALKER
# ============================================================

async def _parse_node(node, options: ParsingOptions, admission: ImageAdmission) -> list[Block]:
    node_type = getattr(node, "type", None)

    if node_type == "heading":
        return [parse_heading(node)]
    if node_type == "paragraph":
        return await parse_phrasing(node.children, admission)
    if node_type == "code":
        return [parse_code(node)]
    if node_type == "list":
        return [parse_list(node, options.lists)]
    if node_type == "table":
        return [parse_table(node)]
    if node_type == "blockquote":
        return await parse_blockquote(node, admission)
    if node_type == "hr":
        return [divider()]
    if node_type == "html":
        return await parse_html(node.raw, admission)
    if node_type == "image":
        return await parse_image(node, admission)
    return []


async def _parse_node_safely(node, options: ParsingOptions, admission: ImageAdmission) -> list[Block]:
    try:
        return await _parse_node(node, options, admission)
    except Exception as e:
        # Malformed nodes produce no blocks rather than failing the document
        logger.warning(f"Skipping {type(node).__name__} node: {type(e).__name__}: {e}")
        return []


async def parse_blocks(
    nodes: list,
    options: Optional[ParsingOptions] = None,
    *,
    probe: Optional[Probe] = None,
) -> list[Block]:
    """Convert a document node sequence into Slack blocks.

    Args:
        nodes: Top-level document nodes, in document order
        options: Conversion options (checkbox prefix for task lists)
        probe: Liveness probe for image URLs. Defaults to an HTTP HEAD
            probe whose client lives for the duration of this call.

    Returns:
        Blocks in the same order as the nodes that produced them
    """
    options = options or ParsingOptions()

    if probe is None:
        async with HttpProbe() as http_probe:
            return await _parse_all(nodes, options, ImageAdmission(http_probe))
    return await _parse_all(nodes, options, ImageAdmission(probe))


async def _parse_all(nodes: list, options: ParsingOptions, admission: ImageAdmission) -> list[Block]:
    # gather() returns results by position, not by completion order
    results = await asyncio.gather(*(_parse_node_safely(node, options, admission) for node in nodes))
    return [block for blocks in results for block in blocks]
