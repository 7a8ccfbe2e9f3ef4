"""
Component Time Service

Turns a saved flight-log leg into hours/cycles on the aircraft's tracked
components.

- calculate_flight_duration: leg flight time in decimal hours (Hobbs first,
  then HH:MM clock times, else 0)
- accrue_component_times: applies one leg to the component-time map
- ComponentTimeService: load / save the map and run the post-save update

Times and cycles only ever go up. Applying the same leg twice counts it
twice; deleting a log does not give the time back.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Mapping, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from models.component_times import ComponentCategory
from models.fleet_aircraft import DEFAULT_TRACKED_COMPONENTS

logger = logging.getLogger(__name__)


# ============================================================
# CONSTANTS
# ============================================================

COMPONENT_TIMES_COLLECTION = "aircraft_component_times"

# One takeoff/landing per leg
LEG_CYCLES = 1

# Clock times carry no date; both are pinned to this UTC midnight
REFERENCE_DATE = datetime(2000, 1, 1, tzinfo=timezone.utc)

TIME_FORMAT = "%H:%M"


# ============================================================
# FLIGHT LOG CALCULATIONS
# ============================================================

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_clock_time(value: str) -> datetime:
    parsed = datetime.strptime(value, TIME_FORMAT)
    return REFERENCE_DATE.replace(hour=parsed.hour, minute=parsed.minute)


def calculate_flight_duration(log_data: Mapping[str, Any]) -> float:
    """
    Flight time for one leg in decimal hours, rounded to 2 places.

    A Hobbs pair wins when landing > take-off. Otherwise the HH:MM clock
    times are used, a landing earlier than the take-off meaning the leg
    crossed midnight. Anything unusable gives 0.
    """
    hobbs_take_off = log_data.get("hobbs_take_off")
    hobbs_landing = log_data.get("hobbs_landing")

    if _is_number(hobbs_take_off) and _is_number(hobbs_landing) and hobbs_landing > hobbs_take_off:
        return round(hobbs_landing - hobbs_take_off, 2)

    take_off_time = log_data.get("take_off_time")
    landing_time = log_data.get("landing_time")

    if take_off_time and landing_time:
        try:
            take_off = _parse_clock_time(take_off_time)
            landing = _parse_clock_time(landing_time)
        except (ValueError, TypeError) as e:
            logger.warning(f"Unparseable flight times take_off={take_off_time!r} landing={landing_time!r}: {e}")
            return 0.0

        if landing < take_off:
            landing += timedelta(days=1)

        diff_minutes = int((landing - take_off).total_seconds() // 60)
        if diff_minutes < 0:
            return 0.0

        return round(diff_minutes / 60, 2)

    return 0.0


def calculate_block_time(log_data: Mapping[str, Any], flight_duration: float) -> float:
    """Taxi-out + flight + taxi-in, in decimal hours"""
    taxi_out = (log_data.get("taxi_out_time_mins") or 0) / 60
    taxi_in = (log_data.get("taxi_in_time_mins") or 0) / 60
    return round(taxi_out + flight_duration + taxi_in, 2)


def calculate_fuel_burn(log_data: Mapping[str, Any]) -> float:
    start = log_data.get("fob_starting_fuel") or 0
    purchased = log_data.get("fuel_purchased_amount") or 0
    ending = log_data.get("ending_fuel") or 0
    return max(round(start + purchased - ending, 1), 0.0)


# ============================================================
# COMPONENT ACCRUAL
# ============================================================

def classify_component(component_name: str) -> ComponentCategory:
    """Case-insensitive category of a tracked component name"""
    name = component_name.strip().lower()

    if name.startswith("engine") or name == "airframe" or name.startswith("propeller"):
        return ComponentCategory.FLIGHT_HOURS
    if name == "apu":
        return ComponentCategory.APU
    return ComponentCategory.UNCLASSIFIED


def accrue_component_times(
    tracked_component_names: Optional[List[str]],
    component_times: Dict[str, Dict[str, Any]],
    flight_duration: float,
    apu_time: float = 0.0,
    cycles: int = LEG_CYCLES,
) -> Dict[str, Dict[str, Any]]:
    """
    Apply one leg to the component-time map, in place.

    Every tracked name ends up in the map, zero-initialised if it was
    missing. Returns the same map so the caller can persist it whole.
    """
    names = tracked_component_names or DEFAULT_TRACKED_COMPONENTS

    for component_name in names:
        key = component_name.strip()
        component = component_times.get(key)
        if not component:
            component = {"time": 0, "cycles": 0}
            component_times[key] = component

        category = classify_component(key)

        if category == ComponentCategory.FLIGHT_HOURS:
            component["time"] = round((component.get("time") or 0) + flight_duration, 2)
            component["cycles"] = (component.get("cycles") or 0) + cycles
        elif category == ComponentCategory.APU and apu_time > 0:
            component["time"] = round((component.get("time") or 0) + apu_time, 2)

    return component_times


# ============================================================
# PERSISTENCE
# ============================================================

class ComponentTimeService:
    """
    Reads and writes aircraft_component_times and runs the post-save
    update for a flight log.

    The map is read, changed in memory and written back whole. There is no
    transaction around it: two saves racing on one aircraft end up
    last-writer-wins.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def get_component_times(self, aircraft_id: str) -> Optional[Dict[str, Dict[str, Any]]]:
        doc = await self.db[COMPONENT_TIMES_COLLECTION].find_one({"_id": aircraft_id})
        if not doc:
            logger.info(f"No component times document for aircraft {aircraft_id}")
            return None
        return doc.get("component_times") or None

    async def save_component_times(self, aircraft_id: str, component_times: Dict[str, Dict[str, Any]]) -> None:
        now = datetime.utcnow()
        try:
            await self.db[COMPONENT_TIMES_COLLECTION].update_one(
                {"_id": aircraft_id},
                {
                    "$set": {"component_times": component_times, "updated_at": now},
                    "$setOnInsert": {"created_at": now}
                },
                upsert=True
            )
        except Exception as e:
            logger.error(f"Failed to save component times for aircraft {aircraft_id}: {e}")
            raise
        logger.info(f"Saved component times for aircraft {aircraft_id} ({len(component_times)} components)")

    async def delete_component_times(self, aircraft_id: str) -> None:
        await self.db[COMPONENT_TIMES_COLLECTION].delete_one({"_id": aircraft_id})

    async def apply_flight_log(
        self,
        aircraft_id: str,
        log_data: Mapping[str, Any],
        flight_log_id: Optional[str] = None,
    ) -> Optional[Dict[str, Dict[str, Any]]]:
        """
        Accrue one saved leg onto the aircraft's components.

        Returns the updated map, or None when the aircraft is unknown or not
        maintenance tracked (both are skips, not errors).
        """
        aircraft = await self.db.fleet.find_one({"_id": aircraft_id})
        if not aircraft:
            logger.warning(f"Aircraft {aircraft_id} not found, component times not updated for flight log {flight_log_id}")
            return None

        if not aircraft.get("is_maintenance_tracked", True):
            logger.info(f"Aircraft {aircraft_id} is not maintenance tracked, skipping component time update")
            return None

        component_times = await self.get_component_times(aircraft_id) or {}

        flight_duration = calculate_flight_duration(log_data)
        apu_time = float(log_data.get("post_leg_apu_time_decimal") or 0)

        accrue_component_times(
            aircraft.get("tracked_component_names"),
            component_times,
            flight_duration,
            apu_time=apu_time,
        )

        await self.save_component_times(aircraft_id, component_times)

        logger.info(
            f"Component times updated | aircraft={aircraft_id} | flight_log={flight_log_id} | "
            f"+{flight_duration:.2f}h | apu=+{apu_time:.2f}h"
        )
        return component_times
