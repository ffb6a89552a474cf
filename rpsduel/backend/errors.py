"""Exception types raised by the catalog, router and webhook client."""

from __future__ import annotations


class CatalogError(ValueError):
    """Base class for choice catalog problems."""


class InvalidChoice(CatalogError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"unknown choice: {raw!r}")
        self.raw = raw


class IllFormedCatalog(CatalogError):
    """Raised while building a catalog whose beats relation is not a tournament."""


class InteractionError(Exception):
    """Client-side problem with an inbound interaction.

    ``reason`` is the short machine-readable string returned to the caller.
    """

    reason = "invalid request"

    def __init__(self, reason: str | None = None) -> None:
        if reason is not None:
            self.reason = reason
        super().__init__(self.reason)


class InvalidRequest(InteractionError):
    reason = "invalid request"


class UnknownCommand(InteractionError):
    reason = "unknown command"


class UnknownInteractionType(InteractionError):
    reason = "unknown interaction type"


class DownstreamDeliveryFailure(RuntimeError):
    """A best-effort webhook call failed."""
