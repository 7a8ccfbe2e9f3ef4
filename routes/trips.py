"""
Trip Routes - Charter trips and their legs
"""

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from datetime import datetime
from typing import List
import logging

from database.mongodb import get_database
from models.trip import Trip, TripCreate

router = APIRouter(prefix="/api/trips", tags=["trips"])
logger = logging.getLogger(__name__)


def generate_id():
    import time
    return str(int(time.time() * 1000000))


@router.post("", response_model=Trip, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip: TripCreate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    trip_id = generate_id()
    now = datetime.utcnow()

    trip_doc = {
        "_id": trip_id,
        **trip.model_dump(mode="json"),
        "created_at": now,
        "updated_at": now
    }

    await db.trips.insert_one(trip_doc)
    logger.info(f"Trip {trip.trip_number} created (id={trip_id}) for aircraft {trip.aircraft_id}")

    return Trip(**trip_doc)


@router.get("", response_model=List[Trip])
async def list_trips(
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    trips = await db.trips.find({}).sort("created_at", -1).to_list(500)
    return [Trip(**t) for t in trips]


@router.get("/{trip_id}", response_model=Trip)
async def get_trip(
    trip_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    trip = await db.trips.find_one({"_id": trip_id})
    if not trip:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")
    return Trip(**trip)


@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    result = await db.trips.delete_one({"_id": trip_id})
    if result.deleted_count == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")

    logger.info(f"Trip {trip_id} deleted")
    return {"message": "Trip deleted", "trip_id": trip_id}
