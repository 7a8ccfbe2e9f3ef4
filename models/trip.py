"""
Trip Model

A charter trip is one aircraft flying one or more legs.

Collection: trips
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


class TripStatus(str, Enum):
    SCHEDULED = "Scheduled"
    CONFIRMED = "Confirmed"
    EN_ROUTE = "En Route"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    DIVERTED = "Diverted"


class LegType(str, Enum):
    CHARTER = "Charter"
    OWNER = "Owner"
    POSITIONING = "Positioning"
    AMBULANCE = "Ambulance"
    CARGO = "Cargo"
    MAINTENANCE = "Maintenance"
    FERRY = "Ferry"


class TripLeg(BaseModel):
    origin: str = Field(..., min_length=1, description="Origin airport code")
    destination: str = Field(..., min_length=1, description="Destination airport code")
    departure_date_time: Optional[datetime] = None
    arrival_date_time: Optional[datetime] = None
    leg_type: LegType = LegType.CHARTER
    passenger_count: int = Field(default=0, ge=0)
    origin_fbo: Optional[str] = None
    destination_fbo: Optional[str] = None
    flight_time_hours: Optional[float] = Field(None, ge=0)
    block_time_hours: Optional[float] = Field(None, ge=0)


class TripCreate(BaseModel):
    trip_number: str = Field(..., min_length=1, description="User-facing trip number (e.g., TRP-XYZ)")
    quote_id: Optional[str] = None
    customer_id: Optional[str] = None
    client_name: str
    aircraft_id: str
    aircraft_label: Optional[str] = None
    legs: List[TripLeg] = Field(..., min_length=1)
    status: TripStatus = TripStatus.SCHEDULED
    notes: Optional[str] = None


class Trip(TripCreate):
    id: str = Field(alias="_id")
    created_at: datetime
    updated_at: datetime

    class Config:
        populate_by_name = True


TRIPS_INDEXES = [
    {
        "keys": [("aircraft_id", 1)],
        "name": "aircraft_id_idx"
    },
    {
        "keys": [("created_at", -1)],
        "name": "created_at_idx"
    },
]
