"""Data models for ElevenLabs Conversational AI responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    # Keep fields we do not model so saved snapshots lose nothing
    model_config = ConfigDict(extra="allow")


class ToolCall(_Record):
    tool_call_id: str
    name: str
    parameters: dict[str, Any] = {}


class ToolResult(_Record):
    tool_call_id: str
    result: Any = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return bool(self.error)


class MetricValue(_Record):
    elapsed_time: int | float


class TurnMetrics(_Record):
    convai_llm_service_ttfb: MetricValue | None = None
    convai_llm_service_ttf_sentence: MetricValue | None = None


class TranscriptTurn(_Record):
    role: str
    message: str | None = None
    time_in_call_secs: int | float = 0
    tool_calls: list[ToolCall] | None = None
    tool_results: list[ToolResult] | None = None
    feedback: Any = None
    conversation_turn_metrics: TurnMetrics | None = None


class ConversationMetadata(_Record):
    start_time_unix_secs: int
    call_duration_secs: int | float
    cost: int | float | None = None
    termination_reason: str | None = None
    authorization_method: str | None = None
    deletion_settings: dict[str, Any] | None = None
    feedback: dict[str, Any] | None = None
    charging: dict[str, Any] | None = None


class ConversationAnalysis(_Record):
    call_successful: str | None = None
    transcript_summary: str | None = None
    evaluation_criteria_results: dict[str, Any] | None = None
    data_collection_results: dict[str, Any] | None = None


class Conversation(_Record):
    conversation_id: str
    agent_id: str
    status: str
    user_id: str | None = None
    transcript: list[TranscriptTurn] = []
    metadata: ConversationMetadata
    analysis: ConversationAnalysis | None = None
    conversation_initiation_client_data: Any = None
    created_at: str | None = None

    def to_json_dict(self) -> dict[str, Any]:
        """Dump only the fields the service sent, extras included."""
        return self.model_dump(mode="json", exclude_unset=True)


class ConversationListItem(_Record):
    conversation_id: str
    agent_id: str
    created_at: str | None = None
    status: str | None = None


class ConversationListResponse(_Record):
    conversations: list[ConversationListItem] = []
