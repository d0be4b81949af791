"""Raw HTML blocks — best-effort extraction of <img> tags.

Markdown documents exported from editors often embed images as raw HTML.
Everything else in the fragment is dropped; Slack has no HTML support.
"""

import logging

from bs4 import BeautifulSoup

from .blocks import ImageBlock, image
from .images import ImageAdmission

logger = logging.getLogger("mdslack.rawhtml")


def extract_img_attrs(raw: str) -> list[dict]:
    """Return the attribute dicts of every <img> tag in the fragment."""
    soup = BeautifulSoup(raw, "html.parser")
    return [dict(tag.attrs) for tag in soup.find_all("img")]


async def parse_html(raw: str, admission: ImageAdmission) -> list[ImageBlock]:
    """Convert a raw HTML fragment to image blocks.

    Any failure (unparsable markup, odd attribute values) yields no blocks
    for this fragment instead of failing the conversion.
    """
    try:
        tags = extract_img_attrs(raw)
        blocks = []
        for attrs in tags:
            url = attrs.get("src")
            if not isinstance(url, str):
                continue
            result = await admission.admit(url)
            if not result.admitted:
                continue
            blocks.append(image(url, attrs.get("alt") or url))
        return blocks
    except Exception as e:
        logger.debug(f"Ignoring raw HTML block ({type(e).__name__}: {e})")
        return []
