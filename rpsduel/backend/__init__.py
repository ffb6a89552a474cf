"""Backend package for the rock paper scissors challenge bot."""

from .catalog import CLASSIC, ChoiceCatalog, get_catalog
from .config import BackendSettings, load_settings
from .outcome import Outcome, Relation, resolve
from .router import InteractionRouter, RouteResult
from .store import InMemorySessionStore, SessionStore, create_store

__all__ = [
    "BackendSettings",
    "ChoiceCatalog",
    "CLASSIC",
    "create_store",
    "get_catalog",
    "InMemorySessionStore",
    "InteractionRouter",
    "load_settings",
    "Outcome",
    "Relation",
    "resolve",
    "RouteResult",
    "SessionStore",
]
