"""Create-Store Validation — runs every section validator and reports all violations.

Invariants:
    - PURE and deterministic: same request in, same ValidationErrors out
    - Every section validator runs on every call (never fail-fast)
    - Fixed order: basic_information, location, operational_hours, tax_and_payment,
      delivery_configuration; order only affects the order of reported paths
    - Return ValidationErrors on violation, None on success

Design Decisions:
    - Explicit tuple of validators over auto-discovery (ADR: ExMA no convention-over-config)
    - None for "valid" mirrors the other core checks: callers branch on `if errors:`
"""

from collections.abc import Callable

from ourzhop.core.domain_types import Section
from ourzhop.core.store_request import CreateStoreRequest
from ourzhop.core.validate_sections import (
    validate_basic_information,
    validate_delivery_configuration,
    validate_location,
    validate_operational_hours,
    validate_tax_and_payment,
)
from ourzhop.core.validation_errors import ValidationErrors


_SECTION_VALIDATORS: tuple[tuple[str, Callable], ...] = (
    (Section.BASIC_INFORMATION.value, validate_basic_information),
    (Section.LOCATION.value, validate_location),
    (Section.OPERATIONAL_HOURS.value, validate_operational_hours),
    (Section.TAX_AND_PAYMENT.value, validate_tax_and_payment),
    (Section.DELIVERY_CONFIGURATION.value, validate_delivery_configuration),
)


def collect_violations(request: CreateStoreRequest) -> ValidationErrors:
    """Run all section validators into one fresh accumulator."""
    errors = ValidationErrors()
    for section_name, validator in _SECTION_VALIDATORS:
        validator(getattr(request, section_name), errors)
    return errors


def validate_create_store_request(
    request: CreateStoreRequest,
) -> ValidationErrors | None:
    """Validate a create-store request. Returns violations, or None when valid."""
    errors = collect_violations(request)
    if errors.has_errors:
        return errors
    return None
