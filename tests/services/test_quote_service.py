"""Quote Service — pre-validation and error propagation over a repository.

Tests cover:
    - create_quote(None) → MissingQuoteError, repository untouched
    - Empty author / non-positive id rejected before the repository is called
    - Repository errors propagate with their kind intact
    - Happy paths delegate to the repository
"""

import pytest

from quotes_api.core.domain_types import Quote, QuoteId
from quotes_api.core.errors import (
    EmptyAuthorError, EmptyTextError, InvalidIDError, MissingQuoteError,
    NoQuotesAvailableError, QuoteNotFoundError,
)
from quotes_api.services.quote_service import QuoteService


class _RecordingRepo:
    """Repository double that records calls and can raise on demand."""

    def __init__(self, raises: Exception | None = None):
        self.calls = []
        self.raises = raises

    def _call(self, name, *args):
        self.calls.append((name, args))
        if self.raises:
            raise self.raises

    def create(self, quote):
        self._call("create", quote)
        quote.id = QuoteId(1)
        return quote

    def get_all(self):
        self._call("get_all")
        return []

    def get_random(self):
        self._call("get_random")
        return Quote(author="A", text="T", id=QuoteId(1))

    def get_by_author(self, author):
        self._call("get_by_author", author)
        return []

    def delete(self, quote_id):
        self._call("delete", quote_id)

    def count(self):
        self._call("count")
        return 0


def test_create_none_raises_missing_quote_without_repo_call():
    repo = _RecordingRepo()
    with pytest.raises(MissingQuoteError) as exc_info:
        QuoteService(repo).create_quote(None)
    assert exc_info.value.http_status == 500
    assert repo.calls == []


def test_create_delegates_to_repo():
    repo = _RecordingRepo()
    quote = QuoteService(repo).create_quote(Quote(author="A", text="T"))
    assert quote.id == 1
    assert repo.calls[0][0] == "create"


@pytest.mark.parametrize("error", [EmptyAuthorError(), EmptyTextError()])
def test_create_propagates_store_error_kind(error):
    repo = _RecordingRepo(raises=error)
    with pytest.raises(type(error)):
        QuoteService(repo).create_quote(Quote(author="", text=""))


def test_get_by_author_empty_rejected_before_repo():
    repo = _RecordingRepo()
    with pytest.raises(EmptyAuthorError):
        QuoteService(repo).get_quotes_by_author("")
    assert repo.calls == []


def test_get_by_author_delegates():
    repo = _RecordingRepo()
    assert QuoteService(repo).get_quotes_by_author("Twain") == []
    assert repo.calls == [("get_by_author", ("Twain",))]


@pytest.mark.parametrize("bad_id", [0, -5])
def test_delete_non_positive_rejected_before_repo(bad_id):
    repo = _RecordingRepo()
    with pytest.raises(InvalidIDError):
        QuoteService(repo).delete_quote(QuoteId(bad_id))
    assert repo.calls == []


def test_delete_propagates_not_found():
    repo = _RecordingRepo(raises=QuoteNotFoundError(7))
    with pytest.raises(QuoteNotFoundError):
        QuoteService(repo).delete_quote(QuoteId(7))


def test_get_random_propagates_no_quotes():
    repo = _RecordingRepo(raises=NoQuotesAvailableError())
    with pytest.raises(NoQuotesAvailableError):
        QuoteService(repo).get_random_quote()


def test_unexpected_repo_error_propagates_unchanged():
    boom = RuntimeError("disk on fire")
    repo = _RecordingRepo(raises=boom)
    with pytest.raises(RuntimeError) as exc_info:
        QuoteService(repo).get_all_quotes()
    assert exc_info.value is boom


def test_service_over_real_store(service):
    service.create_quote(Quote(author="Twain", text="a"))
    service.create_quote(Quote(author="Wilde", text="b"))
    assert [q.text for q in service.get_quotes_by_author("Wilde")] == ["b"]
    service.delete_quote(QuoteId(1))
    assert service.count_quotes() == 1
