"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas decode at the system boundary; domain rules live in core/
    - to_domain() converts into core dataclasses

Design Decisions:
    - Separate from core: schemas are API contracts, core types are what validation reads
"""
