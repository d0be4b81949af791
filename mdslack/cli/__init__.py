"""mdslack CLI — command line interface."""

import click
from mdslack import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mdslack")
def cli():
    """mdslack — convert markdown to Slack Block Kit blocks"""


# Import all command modules (registers commands onto cli group)
from . import cmd_convert  # noqa: E402, F401
