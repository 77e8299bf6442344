"""Domain Types — the Quote entity and the identifier type.

Invariants:
    - QuoteId wraps int, strictly positive, at most MAX_QUOTE_ID
    - Quote.id and Quote.created_at are assigned by the store, never by callers
    - Quote.text is the body of the quotation (serialized as "quote" on the wire)

Design Decisions:
    - NewType over wrapper class: zero runtime cost, full type-checker support
    - Quote as mutable dataclass: store stamps id/created_at in place on create,
      then hands out copies (ADR: callers never alias stored state)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NewType


QuoteId = NewType("QuoteId", int)

# Signed 64-bit ceiling; ids beyond this are rejected as invalid
MAX_QUOTE_ID = 2**63 - 1


@dataclass
class Quote:
    """A short quotation attributed to an author."""
    author: str = ""
    text: str = ""
    id: QuoteId = QuoteId(0)
    created_at: datetime | None = None
