"""Command implementations.

Each command makes at most one API call and returns either ``Ok`` with the
text to print or ``Failure`` with a one-line message. Deciding the exit
status is left to the CLI layer.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import httpx
from pydantic import ValidationError

from .client import ConvAIClient
from .exceptions import ConvAIError
from .report import render_conversation_list, render_report
from .storage import (
    conversation_to_json,
    default_audio_path,
    default_conversation_path,
    save_audio,
    save_conversation,
)

logger = logging.getLogger(__name__)

# Everything a command turns into a Failure
HANDLED_ERRORS = (
    ConvAIError,
    httpx.HTTPError,
    ValidationError,
    json.JSONDecodeError,
    UnicodeDecodeError,
)


@dataclass(frozen=True)
class Ok:
    output: str


@dataclass(frozen=True)
class Failure:
    message: str


CommandResult = Union[Ok, Failure]


def _describe(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return f"Unexpected response from API ({error.error_count()} validation errors)"
    if isinstance(error, (json.JSONDecodeError, UnicodeDecodeError)):
        return "Unexpected response from API (invalid JSON)"
    return str(error) or type(error).__name__


def get_command(
    client: ConvAIClient,
    conversation_id: str,
    save: bool = False,
    output: Path | None = None,
) -> CommandResult:
    """Fetch a conversation and print it as JSON or save it to a file."""
    try:
        conversation = client.get_conversation(conversation_id)

        if save or output:
            path = save_conversation(conversation, output or default_conversation_path(conversation_id))
            return Ok(f"✓ Conversation saved to: {path}")

        return Ok(conversation_to_json(conversation))
    except HANDLED_ERRORS as e:
        logger.debug("get %s failed", conversation_id, exc_info=True)
        return Failure(f"Error fetching conversation: {_describe(e)}")


def list_command(client: ConvAIClient, recent: int = 10) -> CommandResult:
    """List the most recent conversations."""
    try:
        items = client.list_conversations(limit=recent, offset=0)
        return Ok(render_conversation_list(items))
    except HANDLED_ERRORS as e:
        logger.debug("list failed", exc_info=True)
        return Failure(f"Error listing conversations: {_describe(e)}")


def analyze_command(client: ConvAIClient, conversation_id: str) -> CommandResult:
    """Fetch a conversation and render the Markdown analysis report."""
    try:
        conversation = client.get_conversation(conversation_id)
        return Ok(render_report(conversation))
    except HANDLED_ERRORS as e:
        logger.debug("analyze %s failed", conversation_id, exc_info=True)
        return Failure(f"Error analyzing conversation: {_describe(e)}")


def audio_command(
    client: ConvAIClient,
    conversation_id: str,
    output: Path | None = None,
) -> CommandResult:
    """Download a conversation's audio recording to a file."""
    try:
        audio = client.get_audio(conversation_id)
        path = save_audio(audio, output or default_audio_path(conversation_id))
        return Ok(f"✓ Audio saved to: {path}\n  Size: {len(audio) / 1024:.2f} KB")
    except HANDLED_ERRORS as e:
        logger.debug("audio %s failed", conversation_id, exc_info=True)
        return Failure(f"Error downloading audio: {_describe(e)}")
