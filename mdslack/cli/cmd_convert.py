"""Convert command."""

import asyncio
import json
import sys

import click

from . import cli
from .shared import console, err_console, _setup_logging
from ..errors import MdslackError


def _checkbox_prefix(checked: bool) -> str:
    return "☑ " if checked else "☐ "


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False, allow_dash=True), default="-")
@click.option("--timeout", type=float, default=None, help="Image probe timeout in seconds")
@click.option("--checkbox", is_flag=True, help="Render task list items with ☑/☐ instead of bullets")
@click.option("--verbose", "-v", is_flag=True, help="Log rejected images and skipped nodes")
def convert(path, timeout, checkbox, verbose):
    """Convert a markdown file (or stdin) to Slack blocks JSON."""
    _setup_logging(verbose)

    if path == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            err_console.print(f"[red]Cannot read {path}: {e}[/red]")
            raise SystemExit(1)

    async def _convert():
        from mdslack import markdown_to_blocks, blocks_to_dicts
        from mdslack.config import load_settings
        from mdslack.images import HttpProbe
        from mdslack.parser import ListOptions, ParsingOptions

        settings = load_settings(probe_timeout=timeout)
        options = ParsingOptions(lists=ListOptions(checkbox_prefix=_checkbox_prefix if checkbox else None))

        async with HttpProbe(settings) as probe:
            blocks = await markdown_to_blocks(text, options, probe=probe)
        return blocks_to_dicts(blocks)

    try:
        payload = asyncio.run(_convert())
    except MdslackError as e:
        err_console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    console.print_json(json.dumps({"blocks": payload}, ensure_ascii=False))
