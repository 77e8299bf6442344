"""Quote Routes — HTTP mapping for the quote use cases.

Invariants:
    - Handlers are sync: FastAPI runs each on its worker thread pool (one thread per request)
    - Expected error kinds per route propagate to the QuotesError handler (4xx)
    - Anything else becomes InternalServiceError with a generic route message (500)
    - DELETE /quotes/{id} only matches [0-9]+; a non-numeric segment is a routing 404
    - GET /quotes with author present but empty → 400 before reaching the service
    - POST body is decoded as JSON regardless of Content-Type; only malformed
      bodies are 400
    - Expected 4xx kinds are logged once, by the QuotesError handler

Design Decisions:
    - Service resolved from app.state via dependency: no module-level singleton,
      tests build a fresh app per case
    - Non-numeric delete id stays 404 (not 400) for wire compatibility with
      existing clients (ADR: routing-level non-match, Starlette int convertor)
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from quotes_api.core.domain_types import MAX_QUOTE_ID, QuoteId
from quotes_api.core.errors import (
    EmptyAuthorError, EmptyTextError, InternalServiceError, InvalidIDError,
    MissingParameterError, NoQuotesAvailableError, QuoteNotFoundError, QuotesError,
)
from quotes_api.core.repository_protocols import QuoteUseCases
from quotes_api.schemas.quote import QuoteCreate, QuoteResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"])


def get_quote_service(request: Request) -> QuoteUseCases:
    """Resolve the service constructed by create_app()."""
    return request.app.state.quote_service


@contextmanager
def _mapped_errors(
    op: str, failure_message: str, *expected: type[QuotesError],
) -> Iterator[None]:
    """Let expected kinds through; wrap everything else as a generic 500."""
    try:
        yield
    except expected:
        raise
    except Exception as exc:
        logger.error(f"{op}: {exc}", extra={"op": op}, exc_info=True)
        raise InternalServiceError(failure_message) from exc


async def decode_quote_body(request: Request) -> QuoteCreate:
    """Decode the raw body as JSON whatever the Content-Type header says."""
    try:
        return QuoteCreate.model_validate_json(await request.body())
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


@router.post(
    "", response_model=QuoteResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_quote(
    body: QuoteCreate = Depends(decode_quote_body),
    service: QuoteUseCases = Depends(get_quote_service),
):
    """Create a quote; the store assigns id and created_at."""
    with _mapped_errors(
        "create_quote", "Failed to create quote",
        EmptyAuthorError, EmptyTextError,
    ):
        quote = service.create_quote(body.to_domain())
    return QuoteResponse.from_domain(quote)


@router.get("", response_model=list[QuoteResponse])
def list_quotes(
    author: str | None = Query(None),
    service: QuoteUseCases = Depends(get_quote_service),
):
    """List all quotes, or only those by `author` when the parameter is present."""
    if author is None:
        with _mapped_errors("get_all_quotes", "Failed to get quotes"):
            quotes = service.get_all_quotes()
        return [QuoteResponse.from_domain(q) for q in quotes]

    if not author:
        raise MissingParameterError("author")
    with _mapped_errors(
        "get_quotes_by_author", "Failed to get quotes by author",
        EmptyAuthorError,
    ):
        quotes = service.get_quotes_by_author(author)
    return [QuoteResponse.from_domain(q) for q in quotes]


@router.get("/random", response_model=QuoteResponse)
def get_random_quote(service: QuoteUseCases = Depends(get_quote_service)):
    with _mapped_errors(
        "get_random_quote", "Failed to get random quote",
        NoQuotesAvailableError,
    ):
        quote = service.get_random_quote()
    return QuoteResponse.from_domain(quote)


@router.delete(
    "/{quote_id:int}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_quote(
    quote_id: int, service: QuoteUseCases = Depends(get_quote_service),
):
    """Delete by id. 204 with empty body on success."""
    if quote_id > MAX_QUOTE_ID:
        raise InvalidIDError(quote_id)
    with _mapped_errors(
        "delete_quote", "Failed to delete quote",
        QuoteNotFoundError, InvalidIDError,
    ):
        service.delete_quote(QuoteId(quote_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
