"""Tests for block serialization."""

from mdslack.blocks import (
    HEADER_TEXT_LIMIT,
    SECTION_TEXT_LIMIT,
    blocks_to_dicts,
    divider,
    header,
    image,
    section,
)


def test_section_dict():
    assert section("*hi*").to_dict() == {"type": "section", "text": {"type": "mrkdwn", "text": "*hi*"}}


def test_section_append():
    block = section("a")
    block.append("b")
    assert block.text == "ab"


def test_header_dict():
    assert header("Title").to_dict() == {"type": "header", "text": {"type": "plain_text", "text": "Title"}}


def test_image_without_title():
    assert image("https://x/y.png", "alt").to_dict() == {
        "type": "image",
        "image_url": "https://x/y.png",
        "alt_text": "alt",
    }


def test_image_with_title():
    block = image("https://x/y.png", "alt", "Caption").to_dict()
    assert block["title"] == {"type": "plain_text", "text": "Caption"}


def test_divider():
    assert divider().to_dict() == {"type": "divider"}


def test_limits_applied_on_serialization():
    assert len(section("x" * 5000).to_dict()["text"]["text"]) == SECTION_TEXT_LIMIT
    assert len(header("x" * 500).to_dict()["text"]["text"]) == HEADER_TEXT_LIMIT


def test_merged_text_kept_whole_in_memory():
    block = section("x" * SECTION_TEXT_LIMIT)
    block.append("tail")
    assert block.text.endswith("tail")


def test_blocks_to_dicts_order():
    payload = blocks_to_dicts([header("h"), divider(), section("s")])
    assert [b["type"] for b in payload] == ["header", "divider", "section"]
