"""
Fleet Aircraft Model

Charter fleet records. Maintenance tracking is opt-out per aircraft and the
tracked component names drive which hours/cycles counters are kept.

Collection: fleet
"""

from pydantic import BaseModel, Field, EmailStr, field_validator
from typing import Optional, List
from datetime import datetime


DEFAULT_TRACKED_COMPONENTS = ["Airframe", "Engine 1"]


class EngineDetail(BaseModel):
    model: Optional[str] = None
    serial_number: Optional[str] = None


class PropellerDetail(BaseModel):
    model: Optional[str] = None
    serial_number: Optional[str] = None


class FleetAircraftBase(BaseModel):
    tail_number: str = Field(..., min_length=1, description="Tail number (e.g., N123AB)")
    model: str = Field(..., min_length=1, description="Aircraft model (e.g., Cessna Citation CJ3)")
    serial_number: Optional[str] = None
    aircraft_year: Optional[int] = Field(None, ge=1900)
    base_location: Optional[str] = Field(None, description="Home base ICAO (e.g., KTEB)")
    engine_details: List[EngineDetail] = Field(default_factory=list)
    propeller_details: List[PropellerDetail] = Field(default_factory=list)

    # Maintenance tracking
    is_maintenance_tracked: bool = True
    tracked_component_names: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TRACKED_COMPONENTS),
        description="Components to track hours/cycles for (e.g., Airframe, Engine 1, Propeller 1)"
    )

    primary_contact_name: Optional[str] = None
    primary_contact_phone: Optional[str] = None
    primary_contact_email: Optional[EmailStr] = None
    internal_notes: Optional[str] = None

    @field_validator("tail_number")
    @classmethod
    def normalize_tail_number(cls, v: str) -> str:
        return v.upper().strip()

    @field_validator("tracked_component_names", mode="before")
    @classmethod
    def default_tracked_components(cls, v):
        # None or [] both fall back to the default pair
        if not v:
            return list(DEFAULT_TRACKED_COMPONENTS)
        return [name.strip() for name in v if name and name.strip()] or list(DEFAULT_TRACKED_COMPONENTS)


class FleetAircraftSave(FleetAircraftBase):
    pass


class FleetAircraft(FleetAircraftBase):
    id: str = Field(alias="_id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        populate_by_name = True
