"""Slash command definitions installed on the chat platform."""

from __future__ import annotations

from typing import Any

from .catalog import ChoiceCatalog
from .interactions import CONTEXT_BOT_DM, CONTEXT_GUILD, CONTEXT_PRIVATE_CHANNEL

CHAT_INPUT = 1
STRING_OPTION = 3

INTEGRATION_GUILD_INSTALL = 0
INTEGRATION_USER_INSTALL = 1


def command_choices(catalog: ChoiceCatalog) -> list[dict[str, str]]:
    return [{"name": choice.capitalize(), "value": choice.lower()} for choice in catalog.list_choices()]


def build_commands(catalog: ChoiceCatalog) -> list[dict[str, Any]]:
    test_command = {
        "name": "test",
        "description": "Basic command",
        "type": CHAT_INPUT,
        "integration_types": [INTEGRATION_GUILD_INSTALL, INTEGRATION_USER_INSTALL],
        "contexts": [CONTEXT_GUILD, CONTEXT_BOT_DM, CONTEXT_PRIVATE_CHANNEL],
    }
    challenge_command = {
        "name": "challenge",
        "description": "Challenge to a match of rock paper scissors",
        "options": [
            {
                "type": STRING_OPTION,
                "name": "object",
                "description": "Pick your object",
                "required": True,
                "choices": command_choices(catalog),
            }
        ],
        "type": CHAT_INPUT,
        "integration_types": [INTEGRATION_GUILD_INSTALL, INTEGRATION_USER_INSTALL],
        "contexts": [CONTEXT_GUILD, CONTEXT_PRIVATE_CHANNEL],
    }
    return [test_command, challenge_command]


def commands_endpoint(app_id: str) -> str:
    return f"applications/{app_id}/commands"
