"""
Flight Log Routes - Crew actuals per trip leg
Saving a log also rolls the leg's hours/cycles onto the aircraft's tracked
components.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from datetime import datetime
import logging

from database.mongodb import get_database
from models.flight_log import (
    FlightLogLeg,
    FlightLogLegData,
    FlightLogSaveResponse,
    flight_log_doc_id,
)
from services.component_time_service import (
    ComponentTimeService,
    calculate_flight_duration,
    calculate_block_time,
    calculate_fuel_burn,
)

router = APIRouter(prefix="/api", tags=["flight-logs"])
logger = logging.getLogger(__name__)


@router.put("/trips/{trip_id}/legs/{leg_index}/flight-log", response_model=FlightLogSaveResponse)
async def save_flight_log(
    trip_id: str,
    leg_index: int,
    log: FlightLogLegData,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Save (create or overwrite) the flight log for one leg, then update the
    aircraft component times.
    Re-saving the same leg accrues its time again.
    """
    trip = await db.trips.find_one({"_id": trip_id})
    if not trip:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")

    if leg_index < 0 or leg_index >= len(trip.get("legs") or []):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Trip {trip_id} has no leg {leg_index}"
        )

    flight_log_id = flight_log_doc_id(trip_id, leg_index)
    log_data = log.model_dump(mode="json")
    now = datetime.utcnow()

    flight_duration = calculate_flight_duration(log_data)

    await db.flight_logs.update_one(
        {"_id": flight_log_id},
        {
            "$set": {
                **log_data,
                "trip_id": trip_id,
                "leg_index": leg_index,
                "calculated_flight_time_decimal": flight_duration,
                "calculated_block_time_decimal": calculate_block_time(log_data, flight_duration),
                "calculated_fuel_burn": calculate_fuel_burn(log_data),
                "updated_at": now
            },
            "$setOnInsert": {"created_at": now}
        },
        upsert=True
    )

    saved = await db.flight_logs.find_one({"_id": flight_log_id})
    if not saved:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Flight log {flight_log_id} could not be read back after save"
        )
    logger.info(f"Saved flight log {flight_log_id} ({flight_duration:.2f}h)")

    component_times = None
    aircraft_id = trip.get("aircraft_id")
    if aircraft_id:
        component_times = await ComponentTimeService(db).apply_flight_log(
            aircraft_id, log_data, flight_log_id=flight_log_id
        )
    else:
        logger.warning(f"Trip {trip_id} has no aircraft, component times not updated")

    return FlightLogSaveResponse(
        flight_log=FlightLogLeg(**saved),
        component_times_updated=component_times is not None,
        component_times=component_times
    )


@router.get("/trips/{trip_id}/legs/{leg_index}/flight-log", response_model=FlightLogLeg)
async def get_flight_log(
    trip_id: str,
    leg_index: int,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    flight_log_id = flight_log_doc_id(trip_id, leg_index)
    saved = await db.flight_logs.find_one({"_id": flight_log_id})
    if not saved:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Flight log not found")
    return FlightLogLeg(**saved)


@router.delete("/flight-logs/{flight_log_id}")
async def delete_flight_log(
    flight_log_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Delete a flight log.
    Component times are left as they are.
    """
    existing = await db.flight_logs.find_one({"_id": flight_log_id})
    if not existing:
        logger.warning(f"Flight log {flight_log_id} not found for deletion")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Flight log not found")

    # TODO: reverse the accrual (flight time, APU time, one cycle) on the aircraft components
    await db.flight_logs.delete_one({"_id": flight_log_id})

    logger.info(f"Deleted flight log {flight_log_id}")
    return {"message": "Flight log deleted", "flight_log_id": flight_log_id}
