"""Quote Schemas — wire contracts for the /quotes endpoints.

Invariants:
    - Wire field "quote" maps to domain attribute Quote.text
    - QuoteCreate accepts author/quote only; id and created_at in the body are ignored
    - Missing or null fields decode as "" so the store reports EmptyAuthor/EmptyText
    - Non-string field values fail validation (400 at the API boundary)

Design Decisions:
    - Emptiness NOT enforced here: the store owns that rule, and the API must
      report the store's error kinds ("Author cannot be empty"), not a generic
      validation error
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from quotes_api.core.domain_types import Quote


class QuoteCreate(BaseModel):
    """Body of POST /quotes."""
    author: str = ""
    quote: str = ""

    @field_validator("author", "quote", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v

    def to_domain(self) -> Quote:
        return Quote(author=self.author, text=self.quote)


class QuoteResponse(BaseModel):
    """Public quote representation."""
    id: int = Field(gt=0)
    author: str
    quote: str
    created_at: datetime

    @classmethod
    def from_domain(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            id=quote.id,
            author=quote.author,
            quote=quote.text,
            created_at=quote.created_at,
        )
