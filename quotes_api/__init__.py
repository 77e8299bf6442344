"""Quotes API — in-memory HTTP service for short text quotes.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
