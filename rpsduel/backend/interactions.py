"""Parsing of raw interaction payloads into typed events."""

from __future__ import annotations

from typing import Any

from .models import (
    CommandInvocation,
    ComponentInteraction,
    InteractionEvent,
    UnknownInteraction,
    VerificationEvent,
)

PING = 1
APPLICATION_COMMAND = 2
MESSAGE_COMPONENT = 3

CONTEXT_GUILD = 0
CONTEXT_BOT_DM = 1
CONTEXT_PRIVATE_CHANNEL = 2


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _nested(payload: dict[str, Any], *keys: str) -> Any:
    current: Any = payload
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def parse_interaction(payload: dict[str, Any]) -> InteractionEvent:
    """Turn a verified interaction body into one of the event variants."""
    interaction_type = payload.get("type")
    interaction_id = _optional_str(payload.get("id"))
    data = payload.get("data") if isinstance(payload.get("data"), dict) else {}

    if interaction_type == PING:
        return VerificationEvent(interaction_id=interaction_id)

    caller = {
        "token": _optional_str(payload.get("token")),
        "context": payload.get("context") if isinstance(payload.get("context"), int) else None,
        "member_user_id": _optional_str(_nested(payload, "member", "user", "id")),
        "user_id": _optional_str(_nested(payload, "user", "id")),
    }

    if interaction_type == APPLICATION_COMMAND:
        options = [
            str(option["value"])
            for option in _as_list(data.get("options"))
            if isinstance(option, dict) and option.get("value") is not None
        ]
        return CommandInvocation(
            interaction_id=interaction_id or "",
            name=str(data.get("name") or ""),
            options=options,
            **caller,
        )

    if interaction_type == MESSAGE_COMPONENT:
        return ComponentInteraction(
            interaction_id=interaction_id or "",
            custom_id=str(data.get("custom_id") or ""),
            values=[str(value) for value in _as_list(data.get("values"))],
            message_id=_optional_str(_nested(payload, "message", "id")),
            **caller,
        )

    return UnknownInteraction(
        interaction_type=interaction_type if isinstance(interaction_type, int) else None,
        interaction_id=interaction_id,
    )


def resolve_acting_user(event: CommandInvocation | ComponentInteraction) -> str | None:
    """Return the id of the user who triggered the event.

    Guild interactions carry the user under ``member``; DMs and private
    channels carry it at the top level.
    """
    if event.context == CONTEXT_GUILD:
        return event.member_user_id
    return event.user_id
