"""
Index setup for the flight-ops collections.

Created once per process, at startup. Failures are not fatal: an index that
already exists with other options is left as it is.
"""

import logging
from motor.motor_asyncio import AsyncIOMotorDatabase

from models.flight_log import FLIGHT_LOGS_INDEXES
from models.trip import TRIPS_INDEXES

logger = logging.getLogger(__name__)

# Avoid re-creating indexes on every call
_indexes_ensured = False

COLLECTION_INDEXES = {
    "flight_logs": FLIGHT_LOGS_INDEXES,
    "trips": TRIPS_INDEXES,
}


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    global _indexes_ensured

    if _indexes_ensured:
        return

    for collection_name, index_specs in COLLECTION_INDEXES.items():
        for idx_spec in index_specs:
            try:
                await db[collection_name].create_index(
                    idx_spec["keys"],
                    unique=idx_spec.get("unique", False),
                    name=idx_spec["name"],
                    background=True
                )
            except Exception as e:
                logger.debug(f"Index {collection_name}.{idx_spec['name']} skip: {e}")

    _indexes_ensured = True
    logger.info("[FlightOps] Indexes ensured for flight_logs and trips")
