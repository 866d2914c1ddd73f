"""Render conversations as Markdown reports and plain-text listings."""

from __future__ import annotations

import json

from .models import Conversation, ConversationListItem, ToolResult, TranscriptTurn

ROLE_LABELS = {"agent": "🤖 Agent", "user": "👤 User"}


def _num(value: int | float) -> str:
    """Format a number without a trailing ``.0`` for whole values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_duration(seconds: int | float) -> str:
    """Format seconds as ``<minutes>m <seconds>s``, e.g. 105 -> ``1m 45s``."""
    minutes = int(seconds // 60)
    return f"{minutes}m {_num(round(seconds % 60, 3))}s"


def _format_metric(value) -> str:
    if value is None:
        return "N/A"
    return f"{value.elapsed_time:.3f}"


def _results_by_call_id(conversation: Conversation) -> dict[str, ToolResult]:
    results: dict[str, ToolResult] = {}
    for turn in conversation.transcript:
        for result in turn.tool_results or []:
            results.setdefault(result.tool_call_id, result)
    return results


def _tool_calls_section(conversation: Conversation) -> list[str]:
    lines = ["## Tool Calls Analysis", ""]

    tool_turns = [turn for turn in conversation.transcript if turn.tool_calls]
    if not tool_turns:
        lines.append("_No tool calls detected_")
        return lines

    results = _results_by_call_id(conversation)

    for n, turn in enumerate(tool_turns, 1):
        if n > 1:
            lines.append("")
        lines.append(f"### Turn {n} ({_num(turn.time_in_call_secs)}s into call)")
        lines.append("")

        for call in turn.tool_calls:
            params = json.dumps(call.parameters, separators=(",", ":"), ensure_ascii=False)
            lines.append(f"- **{call.name}**")
            lines.append(f"  - ID: `{call.tool_call_id}`")
            lines.append(f"  - Parameters: `{params}`")

        # Results may arrive on a later turn; match them by call id
        matched = [results[c.tool_call_id] for c in turn.tool_calls if c.tool_call_id in results]
        if matched:
            lines.append("")
            lines.append("  **Results:**")
            for result in matched:
                status = "❌ Failed" if result.failed else "✅ Success"
                lines.append(f"  - {status}: `{result.tool_call_id}`")
                if result.failed:
                    lines.append(f"    Error: {result.error}")

    return lines


def _metrics_section(conversation: Conversation) -> list[str]:
    lines = ["## Performance Metrics", ""]

    metric_turns = [
        turn for turn in conversation.transcript if turn.conversation_turn_metrics is not None
    ]
    if not metric_turns:
        lines.append("_No metrics available_")
        return lines

    lines.append("| Turn | TTFB (s) | TTF Sentence (s) |")
    lines.append("|------|----------|------------------|")
    for n, turn in enumerate(metric_turns, 1):
        metrics = turn.conversation_turn_metrics
        ttfb = _format_metric(metrics.convai_llm_service_ttfb)
        ttfs = _format_metric(metrics.convai_llm_service_ttf_sentence)
        lines.append(f"| {n} | {ttfb} | {ttfs} |")

    return lines


def _format_turn(turn: TranscriptTurn) -> list[str]:
    label = ROLE_LABELS["agent"] if turn.role == "agent" else ROLE_LABELS["user"]
    return [f"### {label} ({_num(turn.time_in_call_secs)}s)", "", turn.message or "", ""]


def render_report(conversation: Conversation) -> str:
    """Render a full analysis report for one conversation.

    The output depends only on the conversation, so the same input always
    produces the same text.
    """
    meta = conversation.metadata
    analysis = conversation.analysis

    lines = [
        f"# Conversation Analysis: {conversation.conversation_id}",
        "",
        "## Summary",
        "",
        f"- **Agent ID:** {conversation.agent_id}",
        f"- **Status:** {conversation.status}",
        f"- **Duration:** {format_duration(meta.call_duration_secs)}",
        f"- **Cost:** {_num(meta.cost) if meta.cost is not None else 'N/A'} credits",
    ]
    if analysis and analysis.call_successful:
        lines.append(f"- **Call Success:** {analysis.call_successful}")
    lines.append("")

    if analysis and analysis.transcript_summary:
        lines.extend(["## Transcript Summary", "", analysis.transcript_summary, ""])

    lines.extend(_tool_calls_section(conversation))
    lines.append("")
    lines.extend(_metrics_section(conversation))
    lines.append("")

    lines.extend(["## Full Transcript", ""])
    for turn in conversation.transcript:
        lines.extend(_format_turn(turn))

    return "\n".join(lines)


def render_conversation_list(items: list[ConversationListItem]) -> str:
    """Render the numbered listing printed by ``list``."""
    lines = ["", f"📋 Recent Conversations (showing {len(items)}):", ""]
    for i, item in enumerate(items, 1):
        lines.append(f"{i}. {item.conversation_id}")
        lines.append(f"   Agent: {item.agent_id}")
        lines.append(f"   Created: {item.created_at or 'Unknown'}")
        lines.append("")
    return "\n".join(lines)
