"""Write conversation snapshots and audio recordings to disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .config import AUDIO_DIR, CONVERSATIONS_DIR
from .exceptions import FilesystemError
from .models import Conversation

logger = logging.getLogger(__name__)


def default_conversation_path(conversation_id: str) -> Path:
    return CONVERSATIONS_DIR / f"{conversation_id}.json"


def default_audio_path(conversation_id: str) -> Path:
    return AUDIO_DIR / f"{conversation_id}.wav"


def conversation_to_json(conversation: Conversation) -> str:
    return json.dumps(conversation.to_json_dict(), indent=2, ensure_ascii=False)


def _write(path: Path, data: bytes):
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise FilesystemError(f"Could not write {path}: {e.strerror or e}") from e
    logger.info("Wrote %d bytes to %s", len(data), path)


def save_conversation(conversation: Conversation, path: Path) -> Path:
    """Save a conversation snapshot as indented JSON, creating parent dirs."""
    _write(path, conversation_to_json(conversation).encode("utf-8"))
    return path


def save_audio(audio: bytes, path: Path) -> Path:
    """Save raw audio bytes unchanged, creating parent dirs."""
    _write(path, audio)
    return path
