"""Root conftest — shared test configuration and request builders.

Fixtures:
    - valid_payload: JSON-shaped dict that passes every rule (fresh copy per test)
    - valid_request: the same request as core dataclasses (fresh per test)
"""

import copy
import os

import pytest

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

from ourzhop.core.store_request import (
    BankInformation,
    BasicInformation,
    CreateStoreRequest,
    DeliveryConfiguration,
    GpsCoordinates,
    Location,
    OperationalHours,
    TaxAndPayment,
)

_VALID_PAYLOAD = {
    "basic_information": {
        "store_name": "Green Basket",
        "store_type": "Grocery",
        "store_image": "https://cdn.example.com/green-basket.png",
        "contact_number": "+919876543210",
        "is_manager_same_as_owner": False,
        "shop_manager_id": "mgr-1024",
    },
    "location": {
        "gps_coordinates": {"latitude": 12.9716, "longitude": 77.5946},
        "area": "Indiranagar",
        "city": "Bengaluru",
        "pincode": "560038",
    },
    "operational_hours": {
        "is_open_24_hours": False,
        "opening_time": "09:00",
        "closing_time": "21:30",
        "is_own_pickup_enabled": True,
        "own_pickup_ready_time": "30 minutes",
    },
    "tax_and_payment": {
        "gst_registered": True,
        "gst_number": "29ABCDE1234F1Z5",
        "is_payment_gateway_enabled": True,
        "bank_information": {
            "account_holder_name": "Green Basket Pvt Ltd",
            "bank_account_number": "001234567890",
            "bank_ifsc_code": "HDFC0001234",
        },
    },
    "delivery_configuration": {
        "is_delivery_enabled": True,
        "delivery_location_type": "Radius",
        "delivery_radius_km": 5.0,
        "delivery_locations": [],
        "free_delivery_min_order": 499.0,
        "delivery_fee_if_min_not_met": 40.0,
    },
}


@pytest.fixture
def valid_payload() -> dict:
    return copy.deepcopy(_VALID_PAYLOAD)


@pytest.fixture
def valid_request() -> CreateStoreRequest:
    p = _VALID_PAYLOAD
    location = p["location"]
    tax = p["tax_and_payment"]
    return CreateStoreRequest(
        basic_information=BasicInformation(**p["basic_information"]),
        location=Location(
            gps_coordinates=GpsCoordinates(**location["gps_coordinates"]),
            area=location["area"],
            city=location["city"],
            pincode=location["pincode"],
        ),
        operational_hours=OperationalHours(**p["operational_hours"]),
        tax_and_payment=TaxAndPayment(
            gst_registered=tax["gst_registered"],
            gst_number=tax["gst_number"],
            is_payment_gateway_enabled=tax["is_payment_gateway_enabled"],
            bank_information=BankInformation(**tax["bank_information"]),
        ),
        delivery_configuration=DeliveryConfiguration(
            **copy.deepcopy(p["delivery_configuration"]),
        ),
    )
