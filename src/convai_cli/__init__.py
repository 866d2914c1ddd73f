"""convai-cli: inspect ElevenLabs Conversational AI calls from the terminal."""

__version__ = "1.0.0"
