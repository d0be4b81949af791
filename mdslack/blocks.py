"""Slack Block Kit blocks produced by the converter.

Only four block types are emitted:
  section  — mrkdwn text (mutable: adjacent inline runs are merged into it)
  header   — plain text
  image    — image_url + alt_text (+ optional title)
  divider  — no fields

Slack rejects payloads whose fields exceed its length limits, so every
block truncates its fields when serialized with ``to_dict()``.
"""

from dataclasses import dataclass
from typing import Optional, Union

# Slack Block Kit field limits
SECTION_TEXT_LIMIT = 3000
HEADER_TEXT_LIMIT = 150
IMAGE_URL_LIMIT = 3000
IMAGE_ALT_TEXT_LIMIT = 2000
IMAGE_TITLE_LIMIT = 2000


@dataclass
class SectionBlock:
    text: str

    def append(self, content: str):
        """Merge another inline run into this section."""
        self.text += content

    def to_dict(self) -> dict:
        return {
            "type": "section",
            "text": {"type": "mrkdwn", "text": self.text[:SECTION_TEXT_LIMIT]},
        }


@dataclass(frozen=True)
class HeaderBlock:
    text: str

    def to_dict(self) -> dict:
        return {
            "type": "header",
            "text": {"type": "plain_text", "text": self.text[:HEADER_TEXT_LIMIT]},
        }


@dataclass(frozen=True)
class ImageBlock:
    image_url: str
    alt_text: str
    title: Optional[str] = None

    def to_dict(self) -> dict:
        block = {
            "type": "image",
            "image_url": self.image_url[:IMAGE_URL_LIMIT],
            "alt_text": self.alt_text[:IMAGE_ALT_TEXT_LIMIT],
        }
        if self.title:
            block["title"] = {"type": "plain_text", "text": self.title[:IMAGE_TITLE_LIMIT]}
        return block


@dataclass(frozen=True)
class DividerBlock:

    def to_dict(self) -> dict:
        return {"type": "divider"}


Block = Union[SectionBlock, HeaderBlock, ImageBlock, DividerBlock]


def section(text: str) -> SectionBlock:
    return SectionBlock(text)


def header(text: str) -> HeaderBlock:
    return HeaderBlock(text)


def image(url: str, alt_text: str, title: Optional[str] = None) -> ImageBlock:
    return ImageBlock(url, alt_text, title)


def divider() -> DividerBlock:
    return DividerBlock()


def blocks_to_dicts(blocks: list[Block]) -> list[dict]:
    """Serialize blocks to the JSON-ready list Slack's API expects."""
    return [block.to_dict() for block in blocks]
