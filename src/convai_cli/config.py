"""Central configuration for paths, constants and API key resolution."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable holding the API key
API_KEY_ENV_VAR = "ELEVENLABS_API_KEY"

# Remote service — override with ELEVENLABS_BASE_URL env var
BASE_URL = os.environ.get("ELEVENLABS_BASE_URL", "https://api.elevenlabs.io")
DEFAULT_TIMEOUT = 30.0  # seconds

# .env file looked up relative to the working directory
DEFAULT_ENV_PATH = Path(".env")

# Output locations used when saving without an explicit --output
CONVERSATIONS_DIR = Path("conversations")
AUDIO_DIR = Path("audio")

DEFAULT_LIST_LIMIT = 10


@dataclass(frozen=True)
class Config:
    api_key: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return f"Config(api_key='***', base_url={self.base_url!r}, timeout={self.timeout!r})"


def load_config(
    api_key: str | None = None,
    env_path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Resolve the API key and build a Config.

    Priority, highest first: explicit ``api_key``, the process environment,
    then the ``.env`` file. The process environment is read but never
    modified.
    """
    if api_key:
        logger.debug("Using API key passed explicitly")
        return Config(api_key=api_key)

    env: dict[str, str | None] = {}

    path = Path(env_path) if env_path is not None else DEFAULT_ENV_PATH
    if path.exists():
        logger.debug("Reading %s", path)
        env.update(dotenv_values(path))

    # Variables already set in the environment take precedence over the file
    env.update(os.environ if environ is None else environ)

    resolved = env.get(API_KEY_ENV_VAR)
    if not resolved:
        raise ConfigurationError(
            f"{API_KEY_ENV_VAR} not found. "
            "Set it via .env file, environment variable, or --api-key flag."
        )

    return Config(api_key=resolved)
