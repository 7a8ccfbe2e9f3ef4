"""
Fleet Routes - Charter fleet aircraft records
Maintenance tracking flags and tracked component names live here.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from datetime import datetime
from typing import List
import logging

from database.mongodb import get_database
from models.fleet_aircraft import FleetAircraft, FleetAircraftSave
from services.component_time_service import ComponentTimeService

router = APIRouter(prefix="/api/fleet", tags=["fleet"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[FleetAircraft])
async def list_fleet_aircraft(
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """List all fleet aircraft by tail number"""
    aircraft_list = await db.fleet.find({}).sort("tail_number", 1).to_list(500)
    logger.info(f"Fetched fleet: {len(aircraft_list)} aircraft")
    return [FleetAircraft(**aircraft) for aircraft in aircraft_list]


@router.get("/{aircraft_id}", response_model=FleetAircraft)
async def get_fleet_aircraft(
    aircraft_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    aircraft = await db.fleet.find_one({"_id": aircraft_id})
    if not aircraft:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Aircraft not found")
    return FleetAircraft(**aircraft)


@router.put("/{aircraft_id}", response_model=FleetAircraft)
async def save_fleet_aircraft(
    aircraft_id: str,
    aircraft: FleetAircraftSave,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Create or update a fleet aircraft.
    Missing/empty tracked components fall back to Airframe + Engine 1.
    """
    now = datetime.utcnow()

    await db.fleet.update_one(
        {"_id": aircraft_id},
        {
            "$set": {**aircraft.model_dump(mode="json"), "updated_at": now},
            "$setOnInsert": {"created_at": now}
        },
        upsert=True
    )

    saved = await db.fleet.find_one({"_id": aircraft_id})
    logger.info(f"Saved fleet aircraft {aircraft_id} ({saved['tail_number']})")
    return FleetAircraft(**saved)


@router.delete("/{aircraft_id}")
async def delete_fleet_aircraft(
    aircraft_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """Delete an aircraft and its component-time record"""
    result = await db.fleet.delete_one({"_id": aircraft_id})
    if result.deleted_count == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Aircraft not found")

    await ComponentTimeService(db).delete_component_times(aircraft_id)

    logger.info(f"Deleted fleet aircraft {aircraft_id} and its component times")
    return {"message": "Aircraft deleted", "aircraft_id": aircraft_id}
