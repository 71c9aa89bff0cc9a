"""Services Layer — use cases that wrap the pure core with IO.

Invariants:
    - Services call core validation before any collaborator
    - Collaborators arrive through core/repository_protocols.py types

Design Decisions:
    - One service per resource for locality (ADR: ExMA no god objects)
"""
