import random

from rpsduel.backend.catalog import CLASSIC
from rpsduel.backend.models import (
    CommandInvocation,
    ComponentInteraction,
    UnknownInteraction,
    VerificationEvent,
)
from rpsduel.backend.router import InteractionRouter
from rpsduel.backend.store import InMemorySessionStore


def _router(store: InMemorySessionStore | None = None) -> InteractionRouter:
    return InteractionRouter(
        store=store if store is not None else InMemorySessionStore(),
        catalog=CLASSIC,
        app_id="app-1",
        decorate=lambda: "✨",
        rng=random.Random(3),
    )


def _challenge(choice: str | None = "rock", user_id: str | None = "U1") -> CommandInvocation:
    return CommandInvocation(
        interaction_id="m1",
        name="challenge",
        options=[choice] if choice is not None else [],
        token="tok-1",
        context=0,
        member_user_id=user_id,
    )


def _select(value: str | None = "scissors", user_id: str | None = "U2", session_id: str = "m1") -> ComponentInteraction:
    return ComponentInteraction(
        interaction_id="i3",
        custom_id=f"select_choice_{session_id}",
        values=[value] if value is not None else [],
        token="tok-3",
        message_id="menu-3",
        context=0,
        member_user_id=user_id,
    )


def test_verification_is_acknowledged() -> None:
    result = _router().dispatch(VerificationEvent(interaction_id="p"))

    assert result.status_code == 200
    assert result.body == {"type": 1}


def test_test_command_replies_with_decoration() -> None:
    result = _router().dispatch(CommandInvocation(interaction_id="t", name="test"))

    assert result.status_code == 200
    assert result.body == {"type": 4, "data": {"content": "hello world ✨"}}


def test_challenge_creates_session_and_accept_button() -> None:
    store = InMemorySessionStore()

    result = _router(store).dispatch(_challenge())

    assert result.status_code == 200
    button = result.body["data"]["components"][0]["components"][0]
    assert button["custom_id"] == "accept_button_m1"
    assert result.followups == []
    session = store.take("m1")
    assert session is not None
    assert (session.session_id, session.challenger_id, session.choice) == ("m1", "U1", "rock")


def test_challenge_normalizes_choice_case() -> None:
    store = InMemorySessionStore()

    _router(store).dispatch(_challenge(choice="Paper"))

    session = store.take("m1")
    assert session is not None
    assert session.choice == "paper"


def test_challenge_without_recognized_choice_is_invalid_request() -> None:
    store = InMemorySessionStore()
    router = _router(store)

    missing = router.dispatch(_challenge(choice=None))
    unknown = router.dispatch(_challenge(choice="lizard"))

    assert missing.status_code == 400
    assert missing.body == {"error": "invalid request"}
    assert unknown.status_code == 400
    assert len(store) == 0


def test_challenge_without_user_is_invalid_request() -> None:
    store = InMemorySessionStore()

    result = _router(store).dispatch(_challenge(user_id=None))

    assert result.body == {"error": "invalid request"}
    assert len(store) == 0


def test_unknown_command_is_client_error() -> None:
    result = _router().dispatch(CommandInvocation(interaction_id="x", name="dance"))

    assert result.status_code == 400
    assert result.body == {"error": "unknown command"}


def test_accept_returns_ephemeral_menu_and_deletes_challenge_message() -> None:
    store = InMemorySessionStore()
    router = _router(store)
    router.dispatch(_challenge())

    result = router.dispatch(
        ComponentInteraction(
            interaction_id="i2",
            custom_id="accept_button_m1",
            token="tok-2",
            message_id="challenge-msg",
            context=1,
            user_id="U2",
        )
    )

    assert result.status_code == 200
    assert result.body["data"]["flags"] == 64
    menu = result.body["data"]["components"][0]["components"][0]
    assert menu["custom_id"] == "select_choice_m1"
    assert sorted(option["value"] for option in menu["options"]) == sorted(CLASSIC.list_choices())
    assert len(store) == 1
    [call] = result.followups
    assert call.method == "DELETE"
    assert call.endpoint == "webhooks/app-1/tok-2/messages/challenge-msg"


def test_select_resolves_and_removes_session() -> None:
    store = InMemorySessionStore()
    router = _router(store)
    router.dispatch(_challenge(choice="rock"))

    result = router.dispatch(_select(value="scissors"))

    assert result.status_code == 200
    assert "<@U1> wins!" in result.body["data"]["content"]
    assert store.take("m1") is None
    [call] = result.followups
    assert call.method == "PATCH"
    assert call.endpoint == "webhooks/app-1/tok-3/messages/menu-3"
    assert call.body == {"content": "Nice choice ✨", "components": []}


def test_select_for_unknown_or_resolved_game_is_silent() -> None:
    store = InMemorySessionStore()
    router = _router(store)
    router.dispatch(_challenge())
    router.dispatch(_select())

    again = router.dispatch(_select())
    unknown = router.dispatch(_select(session_id="nope"))

    for result in (again, unknown):
        assert result.status_code == 200
        assert result.body is None
        assert result.followups == []


def test_select_without_user_or_choice_is_rejected() -> None:
    store = InMemorySessionStore()
    router = _router(store)

    router.dispatch(_challenge())
    no_user = router.dispatch(_select(user_id=None))
    no_choice = router.dispatch(_select(value=None))
    bad_choice = router.dispatch(_select(value="spock"))

    assert no_user.status_code == 400
    assert no_user.body == {"error": "invalid user"}
    assert no_choice.body == {"error": "invalid choice"}
    assert bad_choice.body == {"error": "invalid choice"}
    assert "m1" in store
    assert len(store) == 1


def test_rejected_selection_keeps_challenge_open_for_retry() -> None:
    store = InMemorySessionStore()
    router = _router(store)
    router.dispatch(_challenge(choice="rock"))

    rejected = router.dispatch(_select(value="Spock"))
    retried = router.dispatch(_select(value="scissors"))

    assert rejected.status_code == 400
    assert rejected.body == {"error": "invalid choice"}
    assert retried.status_code == 200
    assert "<@U1> wins!" in retried.body["data"]["content"]
    assert "m1" not in store


def test_malformed_selection_for_unknown_game_is_silent() -> None:
    result = _router().dispatch(_select(value="spock", session_id="nope"))

    assert result.status_code == 200
    assert result.body is None


def test_unknown_component_and_interaction_types_are_client_errors() -> None:
    router = _router()

    component = router.dispatch(ComponentInteraction(interaction_id="i", custom_id="reroll_m1"))
    other = router.dispatch(UnknownInteraction(interaction_type=5))

    assert component.body == {"error": "unknown interaction type"}
    assert other.status_code == 400
    assert other.body == {"error": "unknown interaction type"}


def test_followups_are_skipped_without_message_reference() -> None:
    result = _router().dispatch(ComponentInteraction(interaction_id="i", custom_id="accept_button_m1"))

    assert result.status_code == 200
    assert result.followups == []
