"""Validation Errors — ordered field-path → message accumulator for one validation run.

Invariants:
    - Keys are dotted field paths ("tax_and_payment.bank_information.bank_ifsc_code")
    - One message per path: a later add() on the same path replaces the message
      but keeps the path's original position
    - Iteration order is the order paths were first reported
    - A fresh instance per validation call, never shared across requests

Design Decisions:
    - dict over list of pairs: the wire format is a JSON object keyed by path,
      so duplicates could not be represented downstream anyway
"""

from collections.abc import Iterator


class ValidationErrors:
    """Accumulates violations; empty means the request is valid."""

    def __init__(self) -> None:
        self._errors: dict[str, str] = {}

    def add(self, field: str, message: str) -> None:
        self._errors[field] = message

    @property
    def has_errors(self) -> bool:
        return len(self._errors) > 0

    @property
    def errors(self) -> dict[str, str]:
        """Copy of the path → message mapping."""
        return dict(self._errors)

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __getitem__(self, field: str) -> str:
        return self._errors[field]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return list(self._errors.items()) == list(other._errors.items())

    def __repr__(self) -> str:
        return f"ValidationErrors({self._errors!r})"

    def __str__(self) -> str:
        return "Validation failed."
