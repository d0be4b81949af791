"""Document tree model — what the tokenizer adapter produces.

Two families of nodes:
  Document nodes  — top-level constructs (heading, paragraph, list, ...)
  Phrasing nodes  — inline content nested inside document nodes

Every class carries a ``type`` string that the converters dispatch on.
``Image`` belongs to both families: it can appear inline or at top level.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union


# ════════════════════════════════════════════════════════
# Phrasing nodes
# ════════════════════════════════════════════════════════

@dataclass
class Text:
    type: ClassVar[str] = "text"
    text: str

    @property
    def raw(self) -> str:
        return self.text


@dataclass
class CodeSpan:
    type: ClassVar[str] = "codespan"
    text: str

    @property
    def raw(self) -> str:
        return f"`{self.text}`"


@dataclass
class InlineHtml:
    type: ClassVar[str] = "html"
    raw: str


@dataclass
class LineBreak:
    type: ClassVar[str] = "br"


@dataclass
class Image:
    type: ClassVar[str] = "image"
    href: str
    text: str = ""              # alt text
    title: Optional[str] = None


@dataclass
class Link:
    type: ClassVar[str] = "link"
    href: str
    children: list["PhrasingNode"] = field(default_factory=list)
    title: Optional[str] = None


@dataclass
class Emphasis:
    type: ClassVar[str] = "em"
    children: list["PhrasingNode"] = field(default_factory=list)


@dataclass
class Strong:
    type: ClassVar[str] = "strong"
    children: list["PhrasingNode"] = field(default_factory=list)


@dataclass
class Strikethrough:
    type: ClassVar[str] = "del"
    children: list["PhrasingNode"] = field(default_factory=list)


PhrasingNode = Union[Link, Emphasis, Strong, Strikethrough, LineBreak, Image, CodeSpan, Text, InlineHtml]

# Containers whose children are further phrasing nodes
CONTAINER_TYPES = frozenset({"link", "em", "strong", "del"})


# ════════════════════════════════════════════════════════
# Document nodes
# ════════════════════════════════════════════════════════

@dataclass
class Heading:
    type: ClassVar[str] = "heading"
    depth: int
    children: list[PhrasingNode] = field(default_factory=list)


@dataclass
class Paragraph:
    type: ClassVar[str] = "paragraph"
    children: list[PhrasingNode] = field(default_factory=list)


@dataclass
class Code:
    type: ClassVar[str] = "code"
    text: str
    lang: Optional[str] = None


@dataclass
class ListItem:
    """One list entry.

    ``children`` holds the inline content of the item's first text-bearing
    block, or None when the item starts with something else (a nested list,
    a code block). ``text`` is the raw fallback used in that case.
    ``checked`` is None for plain items and True/False for task items.
    """
    type: ClassVar[str] = "list_item"
    text: str = ""
    children: Optional[list[PhrasingNode]] = None
    checked: Optional[bool] = None


@dataclass
class List:
    type: ClassVar[str] = "list"
    items: list[ListItem] = field(default_factory=list)
    ordered: bool = False
    start: Optional[int] = None  # source marker, never used for numbering


@dataclass
class TableCell:
    type: ClassVar[str] = "table_cell"
    children: list[PhrasingNode] = field(default_factory=list)


@dataclass
class Table:
    type: ClassVar[str] = "table"
    header: list[TableCell] = field(default_factory=list)
    rows: list[list[TableCell]] = field(default_factory=list)


@dataclass
class Blockquote:
    type: ClassVar[str] = "blockquote"
    children: list["DocumentNode"] = field(default_factory=list)


@dataclass
class ThematicBreak:
    type: ClassVar[str] = "hr"


@dataclass
class Html:
    type: ClassVar[str] = "html"
    raw: str


DocumentNode = Union[Heading, Paragraph, Code, List, Table, Blockquote, ThematicBreak, Html, Image]
