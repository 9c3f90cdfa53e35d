from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class ClientError(DomainError):
    """Caller supplied something the registries cannot serve. Never retried."""


class InvalidTokenError(ClientError):
    """Token symbol is not registered on the requested chain."""


class UnsupportedChainError(ClientError):
    """Chain id is not registered or has no handler for the operation."""


class QuoteInputError(ClientError):
    """Malformed quote parameters."""


class PositionsInputError(ClientError):
    """Malformed position lookup parameters."""


class WalletTransactionsInputError(ClientError):
    """Missing or malformed wallet address."""


class PriceUnavailableError(DomainError):
    """Resolved USD price is zero after every fallback."""


class UpstreamUnavailableError(DomainError):
    """An external data source failed; callers degrade instead of surfacing it."""
