"""
Component Time Routes - Hours/cycles per tracked component of an aircraft
"""

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
import logging

from database.mongodb import get_database
from models.component_times import AircraftComponentTimes, ComponentTimesUpdate
from models.fleet_aircraft import DEFAULT_TRACKED_COMPONENTS
from services.component_time_service import ComponentTimeService

router = APIRouter(prefix="/api/fleet", tags=["component-times"])
logger = logging.getLogger(__name__)


async def get_aircraft_or_404(db: AsyncIOMotorDatabase, aircraft_id: str) -> dict:
    aircraft = await db.fleet.find_one({"_id": aircraft_id})
    if not aircraft:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Aircraft not found")
    return aircraft


@router.get("/{aircraft_id}/component-times", response_model=AircraftComponentTimes)
async def get_component_times(
    aircraft_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Stored hours/cycles, with zero entries for tracked components that have
    not flown yet.
    """
    aircraft = await get_aircraft_or_404(db, aircraft_id)

    component_times = await ComponentTimeService(db).get_component_times(aircraft_id) or {}

    result = dict(component_times)
    for name in aircraft.get("tracked_component_names") or DEFAULT_TRACKED_COMPONENTS:
        result.setdefault(name.strip(), {"time": 0, "cycles": 0})

    return AircraftComponentTimes(aircraft_id=aircraft_id, component_times=result)


@router.put("/{aircraft_id}/component-times", response_model=AircraftComponentTimes)
async def save_component_times(
    aircraft_id: str,
    data: ComponentTimesUpdate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Replace the whole map (manual correction)"""
    await get_aircraft_or_404(db, aircraft_id)

    component_times = {
        name.strip(): value.model_dump()
        for name, value in data.component_times.items()
        if name.strip()
    }

    await ComponentTimeService(db).save_component_times(aircraft_id, component_times)
    logger.info(f"Component times replaced manually for aircraft {aircraft_id}")

    return AircraftComponentTimes(aircraft_id=aircraft_id, component_times=component_times)
