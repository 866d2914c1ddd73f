"""Test configuration and fixtures."""

import copy
from typing import Any

import httpx
import pytest

from convai_cli.client import ConvAIClient
from convai_cli.config import Config

CONVERSATION: dict[str, Any] = {
    "conversation_id": "conv_abc123",
    "agent_id": "agent_xyz",
    "status": "done",
    "transcript": [
        {
            "role": "agent",
            "message": "Hi! How can I help?",
            "time_in_call_secs": 0,
            "tool_calls": None,
            "tool_results": None,
            "conversation_turn_metrics": None,
        },
        {
            "role": "user",
            "message": "Where is my order 42?",
            "time_in_call_secs": 4,
        },
        {
            "role": "agent",
            "message": "Let me check.",
            "time_in_call_secs": 6,
            "tool_calls": [
                {
                    "tool_call_id": "call_1",
                    "name": "lookup_order",
                    "parameters": {"order_id": 42, "verbose": False},
                }
            ],
            "tool_results": [
                {"tool_call_id": "call_1", "result": {"status": "shipped"}},
            ],
            "conversation_turn_metrics": {
                "convai_llm_service_ttfb": {"elapsed_time": 0.4213},
                "convai_llm_service_ttf_sentence": {"elapsed_time": 0.9},
            },
        },
        {
            "role": "agent",
            "message": "Your order has shipped.",
            "time_in_call_secs": 9.5,
            "conversation_turn_metrics": {
                "convai_llm_service_ttfb": {"elapsed_time": 0.25},
            },
        },
    ],
    "metadata": {
        "start_time_unix_secs": 1760522400,
        "call_duration_secs": 105,
        "cost": 320,
        "termination_reason": "client disconnected",
        "feedback": {"overall_score": None, "likes": 0, "dislikes": 0},
    },
    "analysis": {
        "call_successful": "success",
        "transcript_summary": "The user asked about order 42, which has shipped.",
        "evaluation_criteria_results": {},
    },
    "has_audio": True,
}


@pytest.fixture
def conversation_data() -> dict[str, Any]:
    """A fresh copy of a realistic conversation payload."""
    return copy.deepcopy(CONVERSATION)


@pytest.fixture
def config() -> Config:
    return Config(api_key="test-api-key-123", base_url="https://api.test")


@pytest.fixture
def make_client(config: Config):
    """Build a ConvAIClient whose requests are answered by ``handler``."""
    clients = []

    def factory(handler):
        client = ConvAIClient(config, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
