"""CLI interface for convai-cli."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .client import ConvAIClient
from .commands import CommandResult, Failure, analyze_command, audio_command, get_command, list_command
from .config import DEFAULT_LIST_LIMIT, load_config
from .exceptions import ConfigurationError

api_key_option = click.option("--api-key", "api_key", metavar="KEY", help="ElevenLabs API key")


def _make_client(api_key: str | None) -> ConvAIClient:
    """Resolve configuration once and build the client, or exit on failure."""
    try:
        config = load_config(api_key=api_key)
    except ConfigurationError as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)
    return ConvAIClient(config)


def _finish(result: CommandResult):
    if isinstance(result, Failure):
        click.echo(f"✗ {result.message}", err=True)
        sys.exit(1)
    click.echo(result.output)


@click.group()
@click.version_option(version=__version__, prog_name="elevenlabs-cli")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool):
    """elevenlabs-cli — Analyze ElevenLabs conversational AI calls.

    Fetch conversations, transcripts, latency metrics and audio recordings.
    The API key is read from --api-key, the ELEVENLABS_API_KEY environment
    variable, or a .env file in the current directory.
    """
    # stdout carries JSON and Markdown output, so logs go to stderr
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command("get")
@click.argument("conversation_id")
@click.option("--save", is_flag=True, help="Save conversation to file")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Custom output path")
@api_key_option
def get_cmd(conversation_id: str, save: bool, output: Path | None, api_key: str | None):
    """Fetch and display a conversation by ID.

    Example:
        elevenlabs-cli get conv_abc123 --save
    """
    with _make_client(api_key) as client:
        result = get_command(client, conversation_id, save=save, output=output)
    _finish(result)


@cli.command("list")
@click.option(
    "--recent",
    type=click.IntRange(min=1),
    default=DEFAULT_LIST_LIMIT,
    show_default=True,
    help="Number of conversations to show",
)
@api_key_option
def list_cmd(recent: int, api_key: str | None):
    """List recent conversations."""
    with _make_client(api_key) as client:
        result = list_command(client, recent=recent)
    _finish(result)


@cli.command("analyze")
@click.argument("conversation_id")
@api_key_option
def analyze_cmd(conversation_id: str, api_key: str | None):
    """Analyze conversation with tool calls, failures, and metrics.

    Prints a Markdown report. Redirect it to keep a copy:

        elevenlabs-cli analyze conv_abc123 > report.md
    """
    with _make_client(api_key) as client:
        result = analyze_command(client, conversation_id)
    _finish(result)


@cli.command("audio")
@click.argument("conversation_id")
@click.option("--download", is_flag=True, hidden=True, help="Download audio file (always on)")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Custom output path")
@api_key_option
def audio_cmd(conversation_id: str, download: bool, output: Path | None, api_key: str | None):
    """Download audio recording of a conversation."""
    with _make_client(api_key) as client:
        result = audio_command(client, conversation_id, output=output)
    _finish(result)


def main():
    """Console entry point; usage errors exit with status 1 instead of 2."""
    try:
        rv = cli.main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(rv if isinstance(rv, int) else 0)
