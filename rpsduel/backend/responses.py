"""Response payload models and builders for interaction replies."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field

PONG = 1
CHANNEL_MESSAGE_WITH_SOURCE = 4

EPHEMERAL_FLAG = 1 << 6

ACTION_ROW = 1
BUTTON = 2
STRING_SELECT = 3

BUTTON_STYLE_PRIMARY = 1

ACCEPT_PREFIX = "accept_button_"
SELECT_PREFIX = "select_choice_"


class Button(BaseModel):
    type: Literal[2] = BUTTON
    custom_id: str
    label: str
    style: int = BUTTON_STYLE_PRIMARY


class SelectOption(BaseModel):
    label: str
    value: str
    description: str | None = None


class StringSelect(BaseModel):
    type: Literal[3] = STRING_SELECT
    custom_id: str
    options: list[SelectOption] = Field(min_length=1, max_length=25)


class ActionRow(BaseModel):
    type: Literal[1] = ACTION_ROW
    components: list[Union[Button, StringSelect]]


class MessageData(BaseModel):
    content: str
    flags: int | None = None
    components: list[ActionRow] | None = None


class InteractionResponse(BaseModel):
    type: int
    data: MessageData | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def accept_custom_id(session_id: str) -> str:
    return f"{ACCEPT_PREFIX}{session_id}"


def select_custom_id(session_id: str) -> str:
    return f"{SELECT_PREFIX}{session_id}"


def pong() -> InteractionResponse:
    return InteractionResponse(type=PONG)


def channel_message(
    content: str,
    components: list[ActionRow] | None = None,
    ephemeral: bool = False,
) -> InteractionResponse:
    return InteractionResponse(
        type=CHANNEL_MESSAGE_WITH_SOURCE,
        data=MessageData(
            content=content,
            flags=EPHEMERAL_FLAG if ephemeral else None,
            components=components,
        ),
    )


def challenge_message(user_id: str, session_id: str) -> InteractionResponse:
    row = ActionRow(components=[Button(custom_id=accept_custom_id(session_id), label="Accept")])
    return channel_message(f"Rock papers scissors challenge from <@{user_id}>", components=[row])


def choice_menu(session_id: str, options: list[dict[str, Any]]) -> InteractionResponse:
    menu = StringSelect(
        custom_id=select_custom_id(session_id),
        options=[SelectOption(**option) for option in options],
    )
    return channel_message(
        "What is your object of choice?",
        components=[ActionRow(components=[menu])],
        ephemeral=True,
    )


def confirmation_edit(decoration: str) -> dict[str, Any]:
    """Body for the follow-up edit that replaces the ephemeral choice menu."""
    return {"content": f"Nice choice {decoration}", "components": []}


def error_body(reason: str) -> dict[str, str]:
    return {"error": reason}
