"""Create-Store Request — decoded request shape consumed by the validation core.

Invariants:
    - Sub-objects are Optional: None means "absent from the request"
    - Scalars default to their zero value ("" / False / 0.0 / []); a missing scalar
      and an empty scalar are indistinguishable, exactly as after decoding
    - Plain data only: no validation happens on construction

Design Decisions:
    - Dataclasses in core/, Pydantic in schemas/: core never imports the API layer;
      schemas convert to these via to_domain()
"""

from dataclasses import dataclass, field


@dataclass
class BasicInformation:
    store_name: str = ""
    store_type: str = ""
    store_image: str = ""
    contact_number: str = ""
    is_manager_same_as_owner: bool = False
    shop_manager_id: str = ""


@dataclass
class GpsCoordinates:
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass
class Location:
    gps_coordinates: GpsCoordinates | None = None
    area: str = ""
    city: str = ""
    pincode: str = ""


@dataclass
class OperationalHours:
    is_open_24_hours: bool = False
    opening_time: str = ""
    closing_time: str = ""
    is_own_pickup_enabled: bool = False
    own_pickup_ready_time: str = ""


@dataclass
class BankInformation:
    account_holder_name: str = ""
    bank_account_number: str = ""
    bank_ifsc_code: str = ""


@dataclass
class TaxAndPayment:
    gst_registered: bool = False
    gst_number: str = ""
    is_payment_gateway_enabled: bool = False
    bank_information: BankInformation | None = None


@dataclass
class DeliveryConfiguration:
    is_delivery_enabled: bool = False
    delivery_location_type: str = ""
    delivery_radius_km: float = 0.0
    delivery_locations: list[str] = field(default_factory=list)
    free_delivery_min_order: float = 0.0
    delivery_fee_if_min_not_met: float = 0.0


@dataclass
class CreateStoreRequest:
    """Root request: five independent sections, any of which may be absent."""
    basic_information: BasicInformation | None = None
    location: Location | None = None
    operational_hours: OperationalHours | None = None
    tax_and_payment: TaxAndPayment | None = None
    delivery_configuration: DeliveryConfiguration | None = None
