"""Store Schemas — decoding leniency and conversion into core dataclasses.

Invariants:
    - Missing scalars decode to zero values, missing sections to None
    - Unknown keys are ignored
    - A null field decodes to its default
    - Type mismatches are rejected at decode time, including numeric or boolean strings
    - to_domain() preserves every field, including nested objects
"""

import pytest
from pydantic import ValidationError

from ourzhop.schemas.store import CreateStoreRequestBody, LocationBody


def test_full_payload_converts_to_domain(valid_payload, valid_request):
    body = CreateStoreRequestBody.model_validate(valid_payload)
    assert body.to_domain() == valid_request


def test_empty_payload_has_every_section_absent():
    request = CreateStoreRequestBody.model_validate({}).to_domain()
    assert request.basic_information is None
    assert request.location is None
    assert request.operational_hours is None
    assert request.tax_and_payment is None
    assert request.delivery_configuration is None


def test_missing_scalars_default_to_zero_values():
    request = CreateStoreRequestBody.model_validate({
        "basic_information": {},
        "delivery_configuration": {"is_delivery_enabled": True},
    }).to_domain()
    assert request.basic_information.store_name == ""
    assert request.basic_information.is_manager_same_as_owner is False
    assert request.delivery_configuration.delivery_radius_km == 0.0
    assert request.delivery_configuration.delivery_locations == []


def test_absent_nested_objects_stay_none():
    location = LocationBody.model_validate({"city": "Pune"}).to_domain()
    assert location.gps_coordinates is None
    assert location.city == "Pune"


def test_unknown_keys_are_ignored(valid_payload):
    valid_payload["basic_information"]["nickname"] = "GB"
    valid_payload["unexpected_section"] = {"a": 1}
    body = CreateStoreRequestBody.model_validate(valid_payload)
    assert body.basic_information.store_name == "Green Basket"


def test_integer_coordinates_accepted_as_floats(valid_payload):
    valid_payload["location"]["gps_coordinates"] = {"latitude": 90, "longitude": -180}
    gps = CreateStoreRequestBody.model_validate(valid_payload).to_domain().location.gps_coordinates
    assert gps.latitude == 90.0
    assert gps.longitude == -180.0


@pytest.mark.parametrize("section, field, value", [
    ("location", "gps_coordinates", {"latitude": "north"}),
    ("basic_information", "store_name", 42),
    ("delivery_configuration", "delivery_locations", "Mumbai"),
    ("delivery_configuration", "is_delivery_enabled", "true"),
    ("delivery_configuration", "delivery_radius_km", "12.5"),
])
def test_type_mismatch_rejected(valid_payload, section, field, value):
    valid_payload[section][field] = value
    with pytest.raises(ValidationError):
        CreateStoreRequestBody.model_validate(valid_payload)


def test_string_coordinate_rejected(valid_payload):
    valid_payload["location"]["gps_coordinates"]["latitude"] = "12.5"
    with pytest.raises(ValidationError):
        CreateStoreRequestBody.model_validate(valid_payload)


def test_null_scalars_decode_to_zero_values(valid_payload):
    valid_payload["basic_information"]["shop_manager_id"] = None
    valid_payload["delivery_configuration"]["delivery_radius_km"] = None
    valid_payload["delivery_configuration"]["delivery_locations"] = None
    valid_payload["operational_hours"]["is_own_pickup_enabled"] = None

    request = CreateStoreRequestBody.model_validate(valid_payload).to_domain()

    assert request.basic_information.shop_manager_id == ""
    assert request.delivery_configuration.delivery_radius_km == 0.0
    assert request.delivery_configuration.delivery_locations == []
    assert request.operational_hours.is_own_pickup_enabled is False


def test_null_section_is_absent(valid_payload):
    valid_payload["location"] = None
    valid_payload["tax_and_payment"]["bank_information"] = None
    request = CreateStoreRequestBody.model_validate(valid_payload).to_domain()
    assert request.location is None
    assert request.tax_and_payment.bank_information is None
