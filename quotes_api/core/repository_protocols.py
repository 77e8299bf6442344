"""Boundary Protocols — contracts between the store, the service, and the API.

Invariants:
    - QuoteService depends on QuoteRepository, never on a concrete store
    - Routes depend on QuoteUseCases, never on a concrete service
    - Implementations provided via dependency injection (create_app)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Sync methods: the store does no IO, and route handlers run on the worker
      thread pool, so there is nothing to await
"""

from typing import Protocol

from quotes_api.core.domain_types import Quote, QuoteId


class QuoteRepository(Protocol):
    """Contract for quote storage — implemented by InMemoryQuoteStore."""
    def create(self, quote: Quote) -> Quote: ...
    def get_all(self) -> list[Quote]: ...
    def get_random(self) -> Quote: ...
    def get_by_author(self, author: str) -> list[Quote]: ...
    def delete(self, quote_id: QuoteId) -> None: ...
    def count(self) -> int: ...


class QuoteUseCases(Protocol):
    """Contract for quote use cases — implemented by QuoteService."""
    def create_quote(self, quote: Quote | None) -> Quote: ...
    def get_all_quotes(self) -> list[Quote]: ...
    def get_random_quote(self) -> Quote: ...
    def get_quotes_by_author(self, author: str) -> list[Quote]: ...
    def delete_quote(self, quote_id: QuoteId) -> None: ...
    def count_quotes(self) -> int: ...
