"""Domain models for sessions and parsed interaction events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Session:
    session_id: str
    challenger_id: str
    choice: str
    created_at: float


@dataclass(frozen=True)
class VerificationEvent:
    interaction_id: str | None = None


@dataclass(frozen=True)
class CommandInvocation:
    interaction_id: str
    name: str
    options: list[str] = field(default_factory=list)
    token: str | None = None
    context: int | None = None
    member_user_id: str | None = None
    user_id: str | None = None


@dataclass(frozen=True)
class ComponentInteraction:
    interaction_id: str
    custom_id: str
    values: list[str] = field(default_factory=list)
    token: str | None = None
    message_id: str | None = None
    context: int | None = None
    member_user_id: str | None = None
    user_id: str | None = None


@dataclass(frozen=True)
class UnknownInteraction:
    interaction_type: int | None
    interaction_id: str | None = None


InteractionEvent = Union[VerificationEvent, CommandInvocation, ComponentInteraction, UnknownInteraction]
