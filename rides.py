import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from errors import ValidationError, RidesNotFoundError, ServerError
from models import Ride, RideInput
from validation import validate_ride, to_number, parse_pagination, parse_ride_id, ride_id_in_range

logger = logging.getLogger(__name__)


class RideService:
    """Create / list / get operations over an injected ride store.

    Input is checked before the store is touched. Any store failure becomes
    a ServerError; nothing is retried.
    """

    def __init__(self, store, default_page_size: int = 10):
        self.store = store
        self.default_page_size = default_page_size

    def create_ride(self, ride: RideInput) -> List[Ride]:
        message = validate_ride(ride)
        if message:
            logger.warning("rejected ride: %s", message)
            raise ValidationError(message)
        values = {
            "start_lat": to_number(ride.start_lat),
            "start_long": to_number(ride.start_long),
            "end_lat": to_number(ride.end_lat),
            "end_long": to_number(ride.end_long),
            "rider_name": ride.rider_name,
            "driver_name": ride.driver_name,
            "driver_vehicle": ride.driver_vehicle,
        }
        try:
            ride_id = self.store.insert(values)
            rows = self.store.fetch(ride_id)
        except SQLAlchemyError as exc:
            logger.exception("could not create ride")
            raise ServerError() from exc
        logger.info("created ride %s", ride_id)
        return rows

    def list_rides(self, page: Optional[str] = None, size: Optional[str] = None) -> List[Ride]:
        try:
            offset, limit = parse_pagination(page, size, self.default_page_size)
        except ValidationError as exc:
            logger.warning("rejected pagination page=%r size=%r: %s", page, size, exc.message)
            raise
        try:
            rows = self.store.page(offset, limit)
        except SQLAlchemyError as exc:
            logger.exception("could not list rides")
            raise ServerError() from exc
        if not rows:
            raise RidesNotFoundError()
        return rows

    def get_ride(self, raw_id: str) -> List[Ride]:
        try:
            ride_id = parse_ride_id(raw_id)
        except ValidationError:
            logger.warning("rejected ride id %r", raw_id)
            raise
        if not ride_id_in_range(ride_id):
            raise RidesNotFoundError()
        try:
            rows = self.store.fetch(ride_id)
        except SQLAlchemyError as exc:
            logger.exception("could not fetch ride %s", ride_id)
            raise ServerError() from exc
        if not rows:
            raise RidesNotFoundError()
        return rows
