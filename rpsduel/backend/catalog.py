"""Choice catalogs and the pairwise beats relation between their entries."""

from __future__ import annotations

import random
from collections.abc import Mapping
from itertools import combinations
from typing import Any

from .errors import IllFormedCatalog, InvalidChoice


class ChoiceCatalog:
    """Ordered set of choices plus a complete, antisymmetric beats relation.

    ``beats`` maps each winner to ``{loser: verb}``. Declaration order of the
    mapping is the order returned by :meth:`list_choices`.
    """

    def __init__(
        self,
        beats: Mapping[str, Mapping[str, str]],
        descriptions: Mapping[str, str] | None = None,
    ) -> None:
        self._choices = tuple(choice.lower() for choice in beats)
        self._beats = {
            winner.lower(): {loser.lower(): verb for loser, verb in losers.items()}
            for winner, losers in beats.items()
        }
        self._descriptions = {key.lower(): value for key, value in (descriptions or {}).items()}
        self.validate()

    def validate(self) -> None:
        known = set(self._choices)
        if len(known) != len(self._choices):
            raise IllFormedCatalog("duplicate choice names")
        if len(known) < 2:
            raise IllFormedCatalog("a catalog needs at least two choices")

        for winner, losers in self._beats.items():
            for loser in losers:
                if loser == winner:
                    raise IllFormedCatalog(f"{winner} cannot beat itself")
                if loser not in known:
                    raise IllFormedCatalog(f"{winner} beats unknown choice {loser}")

        for first, second in combinations(self._choices, 2):
            forward = second in self._beats[first]
            backward = first in self._beats[second]
            if forward == backward:
                raise IllFormedCatalog(f"exactly one of {first}/{second} must beat the other")

        for choice in self._descriptions:
            if choice not in known:
                raise IllFormedCatalog(f"description for unknown choice {choice}")

    def list_choices(self) -> list[str]:
        return list(self._choices)

    def normalize(self, raw: str) -> str:
        choice = str(raw).strip().lower()
        if choice not in self._beats:
            raise InvalidChoice(raw)
        return choice

    def beats(self, first: str, second: str) -> bool:
        return second in self._beats[first]

    def verb(self, winner: str, loser: str) -> str:
        return self._beats[winner][loser]

    def describe(self, choice: str) -> str | None:
        return self._descriptions.get(choice)

    def __len__(self) -> int:
        return len(self._choices)


CLASSIC = ChoiceCatalog(
    {
        "rock": {"scissors": "crushes"},
        "paper": {"rock": "covers"},
        "scissors": {"paper": "cuts"},
    }
)

LIZARD_SPOCK = ChoiceCatalog(
    {
        "rock": {"scissors": "crushes", "lizard": "crushes"},
        "paper": {"rock": "covers", "spock": "disproves"},
        "scissors": {"paper": "cuts", "lizard": "decapitates"},
        "lizard": {"spock": "poisons", "paper": "eats"},
        "spock": {"scissors": "smashes", "rock": "vaporizes"},
    }
)

PLATFORM_SAMPLE = ChoiceCatalog(
    {
        "rock": {"virus": "outwaits", "computer": "smashes", "scissors": "crushes"},
        "cowboy": {"scissors": "puts away", "wumpus": "lassos", "rock": "steel-toe kicks"},
        "scissors": {"paper": "cuts", "computer": "cuts cord of", "virus": "cuts DNA of"},
        "virus": {"cowboy": "infects", "computer": "corrupts", "wumpus": "infects"},
        "computer": {"cowboy": "overwhelms", "paper": "uninstalls firmware for", "wumpus": "deletes assets for"},
        "wumpus": {"paper": "draws picture on", "rock": "paints cute face on", "scissors": "admires own reflection in"},
        "paper": {"virus": "ignores", "cowboy": "gives papercut to", "rock": "covers"},
    },
    descriptions={
        "rock": "sedimentary, igneous, or perhaps even metamorphic",
        "cowboy": "yeehaw~",
        "scissors": "careful ! sharp ! edges !!",
        "virus": "genetic mutation, malware, or something inbetween",
        "computer": "beep boop beep bzzrrhggggg",
        "wumpus": "the purple Discord fella",
        "paper": "versatile and iconic",
    },
)

CATALOGS: dict[str, ChoiceCatalog] = {
    "classic": CLASSIC,
    "lizard-spock": LIZARD_SPOCK,
    "sample": PLATFORM_SAMPLE,
}


def get_catalog(name: str) -> ChoiceCatalog:
    try:
        return CATALOGS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown catalog {name!r}, expected one of {sorted(CATALOGS)}") from None


def shuffled_options(catalog: ChoiceCatalog, rng: random.Random | None = None) -> list[dict[str, Any]]:
    """Return select-menu options for every choice in random order."""
    options: list[dict[str, Any]] = []
    for choice in catalog.list_choices():
        option: dict[str, Any] = {"label": choice.capitalize(), "value": choice}
        description = catalog.describe(choice)
        if description:
            option["description"] = description
        options.append(option)
    (rng or random).shuffle(options)
    return options
