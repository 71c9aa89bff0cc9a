"""Section Validators — apply field rules to one request section each.

Invariants:
    - Signature: (section | None, errors) -> None; findings go into errors, never returned
    - Absent section (or absent nested object) => exactly one "required" violation at its
      path, nothing reported beneath it
    - Present section => every field checked independently, no short-circuit
    - Conditionally required fields are checked only when their sibling guard holds
    - No IO, no logging, no exceptions for bad input

Design Decisions:
    - Guard-then-validate helpers (_validate_manager, _validate_bank_information, ...)
      instead of nested ifs: each guard reads only sibling data, so order never matters
    - Paths built from Section values: one spelling of each section name
"""

from ourzhop.core.domain_types import (
    DeliveryLocationType,
    IFSC_CODE_LENGTH,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MAX_STORE_NAME_LENGTH,
    PickupReadyTime,
    Section,
)
from ourzhop.core.field_rules import (
    has_exact_length,
    is_e164,
    is_non_negative,
    is_one_of,
    is_positive,
    is_present,
    is_time_of_day,
    is_url_or_blob,
    is_within_length,
    is_within_range,
)
from ourzhop.core.store_request import (
    BankInformation,
    BasicInformation,
    DeliveryConfiguration,
    GpsCoordinates,
    Location,
    OperationalHours,
    TaxAndPayment,
)
from ourzhop.core.validation_errors import ValidationErrors


PICKUP_READY_TIMES: tuple[str, ...] = tuple(t.value for t in PickupReadyTime)
DELIVERY_LOCATION_TYPES: tuple[str, ...] = tuple(t.value for t in DeliveryLocationType)


def _path(*parts: str) -> str:
    return ".".join(parts)


# ─── basic_information ───────────────────────────────────────────

def validate_basic_information(
    basic: BasicInformation | None, errors: ValidationErrors,
) -> None:
    section = Section.BASIC_INFORMATION.value
    if basic is None:
        errors.add(section, "Basic information is required.")
        return

    if not is_present(basic.store_name):
        errors.add(_path(section, "store_name"), "Store name is required.")
    elif not is_within_length(basic.store_name, MAX_STORE_NAME_LENGTH):
        errors.add(
            _path(section, "store_name"),
            f"Store name must be at most {MAX_STORE_NAME_LENGTH} characters.",
        )

    if not is_present(basic.store_type):
        errors.add(_path(section, "store_type"), "Store type is required.")

    # store_image is optional: only checked when supplied
    if basic.store_image and not is_url_or_blob(basic.store_image):
        errors.add(
            _path(section, "store_image"),
            "Store image must be a valid URL or base64 string.",
        )

    if not is_present(basic.contact_number):
        errors.add(_path(section, "contact_number"), "Contact number is required.")
    elif not is_e164(basic.contact_number):
        errors.add(
            _path(section, "contact_number"),
            "Contact number must be in E.164 format.",
        )

    _validate_manager(basic, errors)


def _validate_manager(basic: BasicInformation, errors: ValidationErrors) -> None:
    """shop_manager_id is required only when the owner does not manage the store."""
    if basic.is_manager_same_as_owner:
        return
    if not is_present(basic.shop_manager_id):
        errors.add(
            _path(Section.BASIC_INFORMATION.value, "shop_manager_id"),
            "Manager ID is required when not the same as owner.",
        )


# ─── location ────────────────────────────────────────────────────

def validate_location(location: Location | None, errors: ValidationErrors) -> None:
    section = Section.LOCATION.value
    if location is None:
        errors.add(section, "Location is required.")
        return

    _validate_gps_coordinates(location.gps_coordinates, errors)

    if not is_present(location.area):
        errors.add(_path(section, "area"), "Area is required.")
    if not is_present(location.city):
        errors.add(_path(section, "city"), "City is required.")
    if not is_present(location.pincode):
        errors.add(_path(section, "pincode"), "Pincode is required.")


def _validate_gps_coordinates(
    gps: GpsCoordinates | None, errors: ValidationErrors,
) -> None:
    path = _path(Section.LOCATION.value, "gps_coordinates")
    if gps is None:
        errors.add(path, "GPS coordinates are required.")
        return

    if not is_within_range(gps.latitude, *LATITUDE_RANGE):
        errors.add(_path(path, "latitude"), "Latitude must be between -90 and 90.")
    if not is_within_range(gps.longitude, *LONGITUDE_RANGE):
        errors.add(_path(path, "longitude"), "Longitude must be between -180 and 180.")


# ─── operational_hours ───────────────────────────────────────────

def validate_operational_hours(
    hours: OperationalHours | None, errors: ValidationErrors,
) -> None:
    section = Section.OPERATIONAL_HOURS.value
    if hours is None:
        errors.add(section, "Operational hours are required.")
        return

    if not hours.is_open_24_hours:
        _validate_time_of_day(hours.opening_time, _path(section, "opening_time"), "Opening", errors)
        _validate_time_of_day(hours.closing_time, _path(section, "closing_time"), "Closing", errors)

    if hours.is_own_pickup_enabled and not is_one_of(
        hours.own_pickup_ready_time, PICKUP_READY_TIMES,
    ):
        allowed = ", ".join(f"'{t}'" for t in PICKUP_READY_TIMES)
        errors.add(
            _path(section, "own_pickup_ready_time"),
            f"Pickup ready time must be one of the allowed options: {allowed}.",
        )


def _validate_time_of_day(
    value: str, path: str, label: str, errors: ValidationErrors,
) -> None:
    if not is_present(value):
        errors.add(
            path, f"{label} time is required if the store is not open 24 hours.",
        )
    elif not is_time_of_day(value):
        errors.add(path, f"{label} time must be in HH:MM format.")


# ─── tax_and_payment ─────────────────────────────────────────────

def validate_tax_and_payment(
    tax: TaxAndPayment | None, errors: ValidationErrors,
) -> None:
    section = Section.TAX_AND_PAYMENT.value
    if tax is None:
        errors.add(section, "Tax and payment information is required.")
        return

    if tax.gst_registered and not is_present(tax.gst_number):
        errors.add(
            _path(section, "gst_number"),
            "GST number is required if the store is GST registered.",
        )

    if tax.is_payment_gateway_enabled:
        _validate_bank_information(tax.bank_information, errors)


def _validate_bank_information(
    bank: BankInformation | None, errors: ValidationErrors,
) -> None:
    path = _path(Section.TAX_AND_PAYMENT.value, "bank_information")
    if bank is None:
        errors.add(
            path, "Bank information is required if the payment gateway is enabled.",
        )
        return

    if not is_present(bank.account_holder_name):
        errors.add(
            _path(path, "account_holder_name"),
            "Account holder name is required in bank information.",
        )
    if not is_present(bank.bank_account_number):
        errors.add(
            _path(path, "bank_account_number"),
            "Bank account number is required in bank information.",
        )
    if not has_exact_length(bank.bank_ifsc_code, IFSC_CODE_LENGTH):
        errors.add(
            _path(path, "bank_ifsc_code"),
            f"IFSC code must be exactly {IFSC_CODE_LENGTH} characters in bank information.",
        )


# ─── delivery_configuration ──────────────────────────────────────

def validate_delivery_configuration(
    delivery: DeliveryConfiguration | None, errors: ValidationErrors,
) -> None:
    section = Section.DELIVERY_CONFIGURATION.value
    if delivery is None:
        errors.add(section, "Delivery configuration is required.")
        return

    if not delivery.is_delivery_enabled:
        return

    _validate_delivery_coverage(delivery, errors)

    if not is_non_negative(delivery.free_delivery_min_order):
        errors.add(
            _path(section, "free_delivery_min_order"),
            "Minimum order amount for free delivery must not be negative.",
        )
    if not is_non_negative(delivery.delivery_fee_if_min_not_met):
        errors.add(
            _path(section, "delivery_fee_if_min_not_met"),
            "Delivery fee must not be negative.",
        )


def _validate_delivery_coverage(
    delivery: DeliveryConfiguration, errors: ValidationErrors,
) -> None:
    """delivery_location_type decides which coverage field is required."""
    section = Section.DELIVERY_CONFIGURATION.value
    location_type = delivery.delivery_location_type

    if location_type == DeliveryLocationType.RADIUS:
        if not is_positive(delivery.delivery_radius_km):
            errors.add(
                _path(section, "delivery_radius_km"),
                "Delivery radius must be a positive number if delivery location type is 'Radius'.",
            )
    elif location_type in (DeliveryLocationType.CITY, DeliveryLocationType.INTERNATIONAL):
        if not delivery.delivery_locations:
            errors.add(
                _path(section, "delivery_locations"),
                "Delivery locations must be provided if delivery location type "
                "is 'City' or 'International'.",
            )
    elif location_type != DeliveryLocationType.PAN_INDIA:
        allowed = ", ".join(f"'{t}'" for t in DELIVERY_LOCATION_TYPES)
        errors.add(
            _path(section, "delivery_location_type"),
            f"Delivery location type must be one of the allowed options: {allowed}.",
        )
