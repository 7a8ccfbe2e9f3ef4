"""
Flight Log Model

Actuals recorded by the crew for one trip leg: times, Hobbs readings,
landings, fuel and APU run time. Saving a log drives the aircraft
component-time update.

Collection: flight_logs (document id: "{trip_id}_{leg_index}")
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict
from datetime import datetime
from enum import Enum

from models.component_times import ComponentTimeData


TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


class ApproachType(str, Enum):
    ILS = "ILS"
    GPS = "GPS"
    VOR = "VOR"
    RNAV = "RNAV"
    VISUAL = "Visual"
    NDB = "NDB"
    OTHER = "Other"


class FuelUnit(str, Enum):
    LBS = "Lbs"
    GAL = "Gal"
    KGS = "Kgs"
    LTRS = "Ltrs"


class FlightLogLegData(BaseModel):
    """
    Crew-entered leg actuals.
    Hobbs and clock pairs are not cross-checked here: an unusable Hobbs pair
    falls back to the clock times when the flight time is worked out.
    """
    taxi_out_time_mins: int = Field(default=0, ge=0)
    take_off_time: Optional[str] = Field(None, pattern=TIME_PATTERN, description="HH:MM, 24-hour")
    hobbs_take_off: Optional[float] = Field(None, ge=0)
    landing_time: Optional[str] = Field(None, pattern=TIME_PATTERN, description="HH:MM, 24-hour")
    hobbs_landing: Optional[float] = Field(None, ge=0)
    taxi_in_time_mins: int = Field(default=0, ge=0)

    approaches: int = Field(default=0, ge=0)
    approach_type: Optional[ApproachType] = None
    day_landings: int = Field(default=0, ge=0)
    night_landings: int = Field(default=0, ge=0)

    night_time_decimal: float = Field(default=0.0, ge=0)
    instrument_time_decimal: float = Field(default=0.0, ge=0)

    fob_starting_fuel: float = Field(default=0.0, ge=0)
    fuel_purchased_amount: float = Field(default=0.0, ge=0)
    fuel_purchased_unit: FuelUnit = FuelUnit.LBS
    ending_fuel: float = Field(default=0.0, ge=0)
    fuel_cost: float = Field(default=0.0, ge=0)
    post_leg_apu_time_decimal: float = Field(default=0.0, ge=0)


class FlightLogLeg(FlightLogLegData):
    """Stored flight log with identifiers and calculated fields"""
    id: str = Field(alias="_id")
    trip_id: str
    leg_index: int = Field(..., ge=0)
    calculated_flight_time_decimal: float = 0.0
    calculated_block_time_decimal: float = 0.0
    calculated_fuel_burn: float = 0.0
    created_at: datetime
    updated_at: datetime

    class Config:
        populate_by_name = True


class FlightLogSaveResponse(BaseModel):
    flight_log: FlightLogLeg
    component_times_updated: bool
    component_times: Optional[Dict[str, ComponentTimeData]] = None


def flight_log_doc_id(trip_id: str, leg_index: int) -> str:
    return f"{trip_id}_{leg_index}"


FLIGHT_LOGS_INDEXES = [
    {
        "keys": [("trip_id", 1), ("leg_index", 1)],
        "unique": True,
        "name": "trip_leg_unique"
    },
]
