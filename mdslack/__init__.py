"""mdslack — markdown to Slack Block Kit.

- Lexer: markdown text → document nodes (mistune)
- Parser: document nodes → section/header/image/divider blocks
- Images: scheme checks + live HEAD probe before an image becomes a block
"""

from typing import Optional

from .blocks import blocks_to_dicts, divider, header, image, section
from .images import ImageAdmission, Probe
from .lexer import tokenize
from .parser import ListOptions, ParsingOptions, parse_blocks

__version__ = "1.0.0"


async def markdown_to_blocks(
    text: str,
    options: Optional[ParsingOptions] = None,
    *,
    probe: Optional[Probe] = None,
) -> list:
    """Convert markdown text straight to Slack blocks."""
    return await parse_blocks(tokenize(text), options, probe=probe)


__all__ = [
    "markdown_to_blocks",
    "parse_blocks",
    "tokenize",
    "ParsingOptions",
    "ListOptions",
    "ImageAdmission",
    "Probe",
    "blocks_to_dicts",
    "section",
    "header",
    "image",
    "divider",
]
