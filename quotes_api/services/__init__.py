"""Services Layer — use-case orchestration between the API and storage.

Invariants:
    - Services depend on core/ protocols only, never on a concrete store
"""
