"""
Aircraft Component Times Model

Running hours/cycles per maintenance-significant component, keyed by the
trimmed component name (e.g. "Airframe", "Engine 1", "APU").

Collection: aircraft_component_times (document id: aircraft id)
Document shape: {"_id": aircraft_id, "component_times": {name: {time, cycles}}, "updated_at"}
"""

from pydantic import BaseModel, Field
from typing import Dict
from enum import Enum


class ComponentCategory(str, Enum):
    """How a component accrues time from a flight leg"""
    FLIGHT_HOURS = "FLIGHT_HOURS"  # airframe, engines, propellers
    APU = "APU"
    UNCLASSIFIED = "UNCLASSIFIED"


class ComponentTimeData(BaseModel):
    time: float = Field(default=0.0, ge=0, description="Accumulated decimal hours")
    cycles: int = Field(default=0, ge=0, description="Accumulated takeoff/landing cycles")


class AircraftComponentTimes(BaseModel):
    aircraft_id: str
    component_times: Dict[str, ComponentTimeData] = Field(default_factory=dict)


class ComponentTimesUpdate(BaseModel):
    """Manual correction of the whole map"""
    component_times: Dict[str, ComponentTimeData]
