"""Interaction dispatch: classifies events and drives the challenge lifecycle."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable

from .catalog import CLASSIC, ChoiceCatalog, shuffled_options
from .decor import random_emoji
from .errors import (
    InteractionError,
    InvalidChoice,
    InvalidRequest,
    UnknownCommand,
    UnknownInteractionType,
)
from .interactions import resolve_acting_user
from .models import CommandInvocation, ComponentInteraction, InteractionEvent, VerificationEvent
from .outcome import PlayerChoice, format_result, resolve
from .responses import (
    ACCEPT_PREFIX,
    SELECT_PREFIX,
    InteractionResponse,
    challenge_message,
    channel_message,
    choice_menu,
    confirmation_edit,
    error_body,
    pong,
)
from .store import SessionStore
from .webhooks import WebhookRequest, message_endpoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteResult:
    """What the transport should answer, plus webhook calls to run afterwards.

    ``body`` is None when no action is taken.
    """

    status_code: int
    body: dict[str, Any] | None = None
    followups: list[WebhookRequest] = field(default_factory=list)


def _ok(response: InteractionResponse, followups: list[WebhookRequest] | None = None) -> RouteResult:
    return RouteResult(status_code=200, body=response.to_payload(), followups=followups or [])


class InteractionRouter:
    def __init__(
        self,
        store: SessionStore,
        catalog: ChoiceCatalog = CLASSIC,
        app_id: str = "",
        decorate: Callable[[], str] = random_emoji,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.app_id = app_id
        self._decorate = decorate
        self._rng = rng or random.Random()

    def dispatch(self, event: InteractionEvent) -> RouteResult:
        try:
            if isinstance(event, VerificationEvent):
                return _ok(pong())
            if isinstance(event, CommandInvocation):
                return self._handle_command(event)
            if isinstance(event, ComponentInteraction):
                return self._handle_component(event)
            logger.error("unknown interaction type %r", getattr(event, "interaction_type", None))
            raise UnknownInteractionType()
        except InteractionError as exc:
            return RouteResult(status_code=400, body=error_body(exc.reason))

    def _handle_command(self, event: CommandInvocation) -> RouteResult:
        if event.name == "test":
            return _ok(channel_message(f"hello world {self._decorate()}"))
        if event.name == "challenge":
            return self._handle_challenge(event)
        logger.warning("unknown command: %s", event.name)
        raise UnknownCommand()

    def _handle_challenge(self, event: CommandInvocation) -> RouteResult:
        user_id = resolve_acting_user(event)
        raw_choice = event.options[0] if event.options else None
        if not event.interaction_id or not user_id or not raw_choice:
            raise InvalidRequest()
        try:
            choice = self.catalog.normalize(raw_choice)
        except InvalidChoice:
            raise InvalidRequest() from None

        session_id = event.interaction_id
        self.store.create(session_id=session_id, challenger_id=user_id, choice=choice)
        logger.info("challenge %s opened by %s", session_id, user_id)
        return _ok(challenge_message(user_id=user_id, session_id=session_id))

    def _handle_component(self, event: ComponentInteraction) -> RouteResult:
        if event.custom_id.startswith(ACCEPT_PREFIX):
            return self._handle_accept(event, event.custom_id[len(ACCEPT_PREFIX):])
        if event.custom_id.startswith(SELECT_PREFIX):
            return self._handle_select(event, event.custom_id[len(SELECT_PREFIX):])
        logger.warning("unknown component id: %s", event.custom_id)
        raise UnknownInteractionType()

    def _handle_accept(self, event: ComponentInteraction, session_id: str) -> RouteResult:
        options = shuffled_options(self.catalog, self._rng)
        followups = self._message_call(event, method="DELETE")
        return _ok(choice_menu(session_id=session_id, options=options), followups)

    def _handle_select(self, event: ComponentInteraction, session_id: str) -> RouteResult:
        try:
            user_id, choice = self._read_selection(event)
        except InteractionError:
            # a rejected selection leaves the challenge open for a retry
            if session_id not in self.store:
                return self._ignore_selection(session_id)
            raise

        session = self.store.take(session_id)
        if session is None:
            return self._ignore_selection(session_id)

        challenger = PlayerChoice(user_id=session.challenger_id, choice=session.choice)
        responder = PlayerChoice(user_id=user_id, choice=choice)
        outcome = resolve(self.catalog, challenger.choice, responder.choice)
        logger.info("challenge %s resolved: %s", session_id, outcome.relation.value)

        followups = self._message_call(event, method="PATCH", body=confirmation_edit(self._decorate()))
        return _ok(channel_message(format_result(challenger, responder, outcome)), followups)

    def _read_selection(self, event: ComponentInteraction) -> tuple[str, str]:
        user_id = resolve_acting_user(event)
        if not user_id:
            raise InvalidRequest("invalid user")
        if not event.values:
            raise InvalidRequest("invalid choice")
        try:
            return user_id, self.catalog.normalize(event.values[0])
        except InvalidChoice:
            raise InvalidRequest("invalid choice") from None

    def _ignore_selection(self, session_id: str) -> RouteResult:
        logger.info("no pending challenge %s, ignoring selection", session_id)
        return RouteResult(status_code=200)

    def _message_call(
        self,
        event: ComponentInteraction,
        method: str,
        body: dict[str, Any] | None = None,
    ) -> list[WebhookRequest]:
        if not event.token or not event.message_id:
            logger.debug("interaction %s has no message to %s", event.interaction_id, method)
            return []
        endpoint = message_endpoint(self.app_id, event.token, event.message_id)
        return [WebhookRequest(endpoint=endpoint, method=method, body=body)]
