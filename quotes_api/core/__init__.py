"""Core Layer — domain types, error vocabulary, and boundary contracts.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - No IO, no async

Design Decisions:
    - Error classes live here so every layer raises and matches the same kinds
"""
