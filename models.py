from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Optional
from sqlalchemy import text
from sqlmodel import SQLModel, Field


class Ride(SQLModel, table=True):
    __tablename__ = "rides"
    # rowids are never handed out twice
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str
    # filled in by the database at insert time
    created: Optional[datetime] = Field(
        default=None,
        nullable=False,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
    )


@dataclass
class RideInput:
    """Untrusted POST /rides body. Every field may be missing or of the wrong type."""

    start_lat: Any = None
    start_long: Any = None
    end_lat: Any = None
    end_long: Any = None
    rider_name: Any = None
    driver_name: Any = None
    driver_vehicle: Any = None

    @classmethod
    def from_payload(cls, payload) -> "RideInput":
        if not isinstance(payload, dict):
            return cls()
        return cls(**{f.name: payload.get(f.name) for f in fields(cls)})


def ride_to_dict(ride: Ride) -> dict:
    return {
        "rideID": ride.id,
        "startLat": ride.start_lat,
        "startLong": ride.start_long,
        "endLat": ride.end_lat,
        "endLong": ride.end_long,
        "riderName": ride.rider_name,
        "driverName": ride.driver_name,
        "driverVehicle": ride.driver_vehicle,
        "created": ride.created.strftime("%Y-%m-%d %H:%M:%S") if ride.created else None,
    }
