"""Infrastructure Layer — database connectivity and logging setup.

Invariants:
    - Infrastructure maps driver exceptions to core/errors.py types
    - Nothing here is imported by core/

Design Decisions:
    - Thin wrappers over SQLAlchemy and logging (ADR: ExMA single responsibility)
"""
