"""Infrastructure Layer — storage backends and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; it never imports services/ or api/
"""
