"""Quote Service — one method per use case, thin pre-validation over the store.

Invariants:
    - Store errors propagate with their kind intact (never re-raised as a new kind)
    - get_quotes_by_author rejects empty author before reaching the store
    - delete_quote rejects id <= 0 before reaching the store
    - create_quote(None) is a caller bug → MissingQuoteError (500), not a 400

Design Decisions:
    - Duplicate guards with the store: the service contract holds even for
      repositories that skip their own checks
    - No retries, no lock access; the store owns its concurrency discipline
"""

import logging

from quotes_api.core.domain_types import Quote, QuoteId
from quotes_api.core.errors import EmptyAuthorError, InvalidIDError, MissingQuoteError
from quotes_api.core.repository_protocols import QuoteRepository

logger = logging.getLogger(__name__)


class QuoteService:
    """Use cases over a QuoteRepository."""

    def __init__(self, repo: QuoteRepository):
        self.repo = repo

    def create_quote(self, quote: Quote | None) -> Quote:
        if quote is None:
            raise MissingQuoteError()
        created = self.repo.create(quote)
        logger.info(
            f"Quote {created.id} created",
            extra={"op": "create_quote", "quote_id": created.id},
        )
        return created

    def get_all_quotes(self) -> list[Quote]:
        return self.repo.get_all()

    def get_random_quote(self) -> Quote:
        return self.repo.get_random()

    def get_quotes_by_author(self, author: str) -> list[Quote]:
        if not author:
            raise EmptyAuthorError()
        return self.repo.get_by_author(author)

    def delete_quote(self, quote_id: QuoteId) -> None:
        if quote_id <= 0:
            raise InvalidIDError(quote_id)
        self.repo.delete(quote_id)
        logger.info(
            f"Quote {quote_id} deleted",
            extra={"op": "delete_quote", "quote_id": quote_id},
        )

    def count_quotes(self) -> int:
        """Number of stored quotes (health probe)."""
        return self.repo.count()
