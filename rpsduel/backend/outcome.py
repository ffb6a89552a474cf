"""Outcome resolution between two catalog choices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .catalog import ChoiceCatalog


class Relation(str, Enum):
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


@dataclass(frozen=True)
class Outcome:
    relation: Relation
    winner: str | None
    verb: str | None = None


@dataclass(frozen=True)
class PlayerChoice:
    user_id: str
    choice: str


def resolve(catalog: ChoiceCatalog, first: str, second: str) -> Outcome:
    """Resolve ``first`` against ``second``; the relation is from ``first``'s side."""
    first = catalog.normalize(first)
    second = catalog.normalize(second)
    if first == second:
        return Outcome(relation=Relation.TIE, winner=None)
    if catalog.beats(first, second):
        return Outcome(relation=Relation.WIN, winner=first, verb=catalog.verb(first, second))
    return Outcome(relation=Relation.LOSE, winner=second, verb=catalog.verb(second, first))


def format_result(challenger: PlayerChoice, responder: PlayerChoice, outcome: Outcome) -> str:
    """Render the public result line, naming the winning user."""
    if outcome.relation is Relation.TIE:
        return (
            f"<@{challenger.user_id}> and <@{responder.user_id}> both picked "
            f"**{challenger.choice}**. It's a tie!"
        )
    if outcome.relation is Relation.WIN:
        winner, loser = challenger, responder
    else:
        winner, loser = responder, challenger
    return (
        f"<@{winner.user_id}>'s **{winner.choice}** {outcome.verb} "
        f"<@{loser.user_id}>'s **{loser.choice}**. <@{winner.user_id}> wins!"
    )
