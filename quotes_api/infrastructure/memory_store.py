"""In-Memory Quote Store — the authoritative, thread-safe quote collection.

Invariants:
    - Ids start at 1 and increase monotonically; never reused after delete
    - create/delete hold the write lock; every read holds the read lock
    - Stored quotes are never handed out; readers receive copies
    - delete uses swap-remove: O(1) removal, order of the rest NOT preserved

Design Decisions:
    - Flat list + swap-remove over an id-keyed dict: matches the documented
      wire behavior of get_all ordering after deletes
    - Writer-preferring RW lock: a steady stream of readers cannot starve create/delete
    - Field validation happens before the lock is taken, no lock held on failure
"""

import random
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone

from quotes_api.core.domain_types import Quote, QuoteId
from quotes_api.core.errors import (
    EmptyAuthorError, EmptyTextError, InvalidIDError,
    NoQuotesAvailableError, QuoteNotFoundError,
)


class ReadWriteLock:
    """Many concurrent readers or one writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class InMemoryQuoteStore:
    """Quote collection guarded by a single reader-writer lock."""

    def __init__(self, rng: random.Random | None = None):
        self._quotes: list[Quote] = []
        self._next_id = 1
        self._lock = ReadWriteLock()
        self._rng = rng or random.Random()
        self.started_at = datetime.now(timezone.utc)

    def create(self, quote: Quote) -> Quote:
        """Assign id and created_at, append, and return the stamped quote."""
        if not quote.author:
            raise EmptyAuthorError()
        if not quote.text:
            raise EmptyTextError()

        with self._lock.write():
            quote.id = QuoteId(self._next_id)
            quote.created_at = datetime.now(timezone.utc)
            self._quotes.append(replace(quote))
            self._next_id += 1
        return quote

    def get_all(self) -> list[Quote]:
        with self._lock.read():
            return [replace(q) for q in self._quotes]

    def get_random(self) -> Quote:
        with self._lock.read():
            if not self._quotes:
                raise NoQuotesAvailableError()
            return replace(self._rng.choice(self._quotes))

    def get_by_author(self, author: str) -> list[Quote]:
        """Exact-match filter; empty list when nothing matches."""
        if not author:
            raise EmptyAuthorError()

        with self._lock.read():
            return [replace(q) for q in self._quotes if q.author == author]

    def delete(self, quote_id: QuoteId) -> None:
        if quote_id <= 0:
            raise InvalidIDError(quote_id)

        with self._lock.write():
            for i, quote in enumerate(self._quotes):
                if quote.id == quote_id:
                    self._quotes[i] = self._quotes[-1]
                    self._quotes.pop()
                    return
        raise QuoteNotFoundError(quote_id)

    def count(self) -> int:
        with self._lock.read():
            return len(self._quotes)
