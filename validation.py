import math
import re
from typing import Optional, Tuple
from errors import ValidationError
from models import RideInput

START_COORDS_MESSAGE = (
    "Start latitude and longitude must be between -90 - 90 and -180 to 180 degrees respectively"
)
END_COORDS_MESSAGE = (
    "End latitude and longitude must be between -90 - 90 and -180 to 180 degrees respectively"
)
RIDER_NAME_MESSAGE = "Rider name must be a non empty string"
DRIVER_NAME_MESSAGE = "Driver name must be a non empty string"
DRIVER_VEHICLE_MESSAGE = "Driver vehicle must be a non empty string"
PAGE_MESSAGE = "Page must be an integer and greater than or equal to 1"
SIZE_MESSAGE = "Size must be an integer and greater than or equal to 1"
ID_MESSAGE = "ID must be an integer"

_POSITIVE_INT = re.compile(r"[0-9]+")
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_MAX_ROW_ID = 2 ** 63 - 1


def to_number(value) -> float:
    """Coerce a raw coordinate to float. Anything that is not a number or a
    numeric string becomes NaN, which fails every range check below."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            # ints too large for a float are far outside any range
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return math.nan
    return math.nan


def _coords_in_range(lat: float, lng: float) -> bool:
    # written as inclusions so that NaN is rejected
    return -90 <= lat <= 90 and -180 <= lng <= 180


def _non_empty_string(value) -> bool:
    return isinstance(value, str) and len(value) >= 1


def validate_ride(ride: RideInput) -> Optional[str]:
    """Return the message of the first rule ``ride`` breaks, or None if it is valid."""
    if not _coords_in_range(to_number(ride.start_lat), to_number(ride.start_long)):
        return START_COORDS_MESSAGE
    if not _coords_in_range(to_number(ride.end_lat), to_number(ride.end_long)):
        return END_COORDS_MESSAGE
    if not _non_empty_string(ride.rider_name):
        return RIDER_NAME_MESSAGE
    if not _non_empty_string(ride.driver_name):
        return DRIVER_NAME_MESSAGE
    if not _non_empty_string(ride.driver_vehicle):
        return DRIVER_VEHICLE_MESSAGE
    return None


def _positive_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or not _POSITIVE_INT.fullmatch(raw):
        return None
    value = int(raw)
    return value if value >= 1 else None


def parse_pagination(page: Optional[str], size: Optional[str], default_size: int = 10) -> Tuple[int, int]:
    """Turn raw ``page``/``size`` query values into ``(offset, limit)``.

    With neither given the first ``default_size`` rows are returned. Otherwise
    both must be positive integers; page is checked before size, and a missing
    half counts as invalid. Offset and limit are capped at the largest SQLite
    integer; no table holds more rows than that.
    """
    if page is None and size is None:
        return 0, default_size
    page_no = _positive_int(page)
    if page_no is None:
        raise ValidationError(PAGE_MESSAGE)
    page_size = _positive_int(size)
    if page_size is None:
        raise ValidationError(SIZE_MESSAGE)
    return min((page_no - 1) * page_size, _MAX_ROW_ID), min(page_size, _MAX_ROW_ID)


def parse_ride_id(raw: str) -> int:
    if raw is None or not _SIGNED_INT.fullmatch(raw):
        raise ValidationError(ID_MESSAGE)
    return int(raw)


def ride_id_in_range(ride_id: int) -> bool:
    """SQLite rowids are signed 64-bit; anything outside cannot exist."""
    return -_MAX_ROW_ID - 1 <= ride_id <= _MAX_ROW_ID
