"""Domain Types — identifiers, enums and limits shared by validation and services.

Invariants:
    - PickupReadyTime and DeliveryLocationType values are the exact wire strings
      (case-sensitive, spaces included)
    - StoreId wraps UUID; never use a bare UUID for a store in domain logic
    - Numeric limits live here, nowhere else

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to the raw request strings and serialize without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

StoreId = NewType("StoreId", UUID)


# ─── Limits ──────────────────────────────────────────────────────

MAX_STORE_NAME_LENGTH: int = 255
IFSC_CODE_LENGTH: int = 11
LATITUDE_RANGE: tuple[float, float] = (-90.0, 90.0)
LONGITUDE_RANGE: tuple[float, float] = (-180.0, 180.0)


# ─── Enums ───────────────────────────────────────────────────────

class PickupReadyTime(str, Enum):
    """Allowed own-pickup preparation windows."""
    FIFTEEN_MINUTES = "15 minutes"
    THIRTY_MINUTES = "30 minutes"
    ONE_HOUR = "1 hour"
    TWO_HOURS = "2 hours"


class DeliveryLocationType(str, Enum):
    """Delivery coverage modes; each decides which extra fields are required."""
    PAN_INDIA = "PAN India"
    RADIUS = "Radius"
    CITY = "City"
    INTERNATIONAL = "International"


class ManagerStatus(str, Enum):
    """Outcome of a manager-account lookup."""
    ACTIVE = "active"
    LOCKED = "locked"
    NOT_FOUND = "not_found"


# ─── Section Paths ───────────────────────────────────────────────

class Section(str, Enum):
    """Top-level request sections, in validation order."""
    BASIC_INFORMATION = "basic_information"
    LOCATION = "location"
    OPERATIONAL_HOURS = "operational_hours"
    TAX_AND_PAYMENT = "tax_and_payment"
    DELIVERY_CONFIGURATION = "delivery_configuration"
