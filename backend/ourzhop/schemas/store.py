"""Store Schemas — Pydantic request/response contracts for the stores endpoint.

Invariants:
    - Request schemas only DECODE: every scalar defaults to its zero value and carries
      no constraints; field rules live in core/validate_sections.py
    - A JSON null on any field decodes to that field's default (zero value or None)
    - Strict types: "12.5" is not a float, "true" is not a bool; ints are accepted as floats
    - Sub-objects default to None so absence reaches the core intact
    - Unknown keys are ignored
    - to_domain() is the single conversion point into core dataclasses

Design Decisions:
    - Lenient schemas over Field(min_length=...) constraints: Pydantic stops at type errors,
      the core must report every violation keyed by path in one response
    - Type mismatches (string for a number, etc.) still fail here and surface as
      "Invalid request payload"
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

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


class _RequestSection(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True,
            )
        return value


class BasicInformationBody(_RequestSection):
    store_name: str = ""
    store_type: str = ""
    store_image: str = ""
    contact_number: str = ""
    is_manager_same_as_owner: bool = False
    shop_manager_id: str = ""

    def to_domain(self) -> BasicInformation:
        return BasicInformation(**self.model_dump())


class GpsCoordinatesBody(_RequestSection):
    latitude: float = 0.0
    longitude: float = 0.0

    def to_domain(self) -> GpsCoordinates:
        return GpsCoordinates(latitude=self.latitude, longitude=self.longitude)


class LocationBody(_RequestSection):
    gps_coordinates: GpsCoordinatesBody | None = None
    area: str = ""
    city: str = ""
    pincode: str = ""

    def to_domain(self) -> Location:
        return Location(
            gps_coordinates=(
                self.gps_coordinates.to_domain() if self.gps_coordinates else None
            ),
            area=self.area,
            city=self.city,
            pincode=self.pincode,
        )


class OperationalHoursBody(_RequestSection):
    is_open_24_hours: bool = False
    opening_time: str = ""
    closing_time: str = ""
    is_own_pickup_enabled: bool = False
    own_pickup_ready_time: str = ""

    def to_domain(self) -> OperationalHours:
        return OperationalHours(**self.model_dump())


class BankInformationBody(_RequestSection):
    account_holder_name: str = ""
    bank_account_number: str = ""
    bank_ifsc_code: str = ""

    def to_domain(self) -> BankInformation:
        return BankInformation(**self.model_dump())


class TaxAndPaymentBody(_RequestSection):
    gst_registered: bool = False
    gst_number: str = ""
    is_payment_gateway_enabled: bool = False
    bank_information: BankInformationBody | None = None

    def to_domain(self) -> TaxAndPayment:
        return TaxAndPayment(
            gst_registered=self.gst_registered,
            gst_number=self.gst_number,
            is_payment_gateway_enabled=self.is_payment_gateway_enabled,
            bank_information=(
                self.bank_information.to_domain() if self.bank_information else None
            ),
        )


class DeliveryConfigurationBody(_RequestSection):
    is_delivery_enabled: bool = False
    delivery_location_type: str = ""
    delivery_radius_km: float = 0.0
    delivery_locations: list[str] = Field(default_factory=list)
    free_delivery_min_order: float = 0.0
    delivery_fee_if_min_not_met: float = 0.0

    def to_domain(self) -> DeliveryConfiguration:
        return DeliveryConfiguration(**self.model_dump())


class CreateStoreRequestBody(_RequestSection):
    """POST /api/v1/stores body: five optional sections."""
    basic_information: BasicInformationBody | None = None
    location: LocationBody | None = None
    operational_hours: OperationalHoursBody | None = None
    tax_and_payment: TaxAndPaymentBody | None = None
    delivery_configuration: DeliveryConfigurationBody | None = None

    def to_domain(self) -> CreateStoreRequest:
        return CreateStoreRequest(
            basic_information=_section(self.basic_information),
            location=_section(self.location),
            operational_hours=_section(self.operational_hours),
            tax_and_payment=_section(self.tax_and_payment),
            delivery_configuration=_section(self.delivery_configuration),
        )


def _section(body: _RequestSection | None):
    return body.to_domain() if body is not None else None


# --- Responses ----------------------------------------------------------------

class StoreData(BaseModel):
    store_id: UUID
    store_name: str
    created_at: datetime


class CreateStoreResponse(BaseModel):
    """201 response for a created store."""
    status: str = "success"
    message: str = "Store created successfully"
    data: StoreData
