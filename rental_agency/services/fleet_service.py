from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Iterable, Optional, TYPE_CHECKING

from rental_agency.exceptions import InvalidDaysError, VehicleNotFoundError
from rental_agency.services.common import _store, round2, to_int_safe, vehicle_to_dict

if TYPE_CHECKING:
    from rental_agency.models.store import Store  # noqa: F401

logger = logging.getLogger(__name__)


def _days(value) -> int:
    """Validate a rental length coming from a query string or caller."""
    n = to_int_safe(value)
    if n is None or n < 0:
        raise InvalidDaysError(f"Error: days must be a non-negative integer (got {value!r})")
    return n


class FleetService:
    """Fleet queries and loading for the web layer. Pass `store` to use a specific Store."""

    @staticmethod
    def summary(*, store: Optional["Store"] = None) -> dict:
        st = store or _store()
        with st.read() as agency:
            return {
                "name": agency.name,
                "total": len(agency),
                "vehicles": [vehicle_to_dict(v) for v in agency],
            }

    @staticmethod
    def fleet_text(*, store: Optional["Store"] = None) -> str:
        st = store or _store()
        with st.read() as agency:
            return str(agency)

    @staticmethod
    def cars_report(days, *, store: Optional["Store"] = None) -> str:
        n = _days(days)
        st = store or _store()
        with st.read() as agency:
            return agency.cars_report(n)

    @staticmethod
    def cars_sorted_by_plate(*, store: Optional["Store"] = None) -> list[dict]:
        st = store or _store()
        with st.read() as agency:
            return [vehicle_to_dict(c) for c in agency.cars_sorted_by_plate()]

    @staticmethod
    def vans_sorted_by_volume(*, store: Optional["Store"] = None) -> list[dict]:
        st = store or _store()
        with st.read() as agency:
            return [vehicle_to_dict(v) for v in agency.vans_sorted_by_volume()]

    @staticmethod
    def brands_with_models(*, store: Optional["Store"] = None) -> dict[str, list[str]]:
        st = store or _store()
        with st.read() as agency:
            return agency.brands_with_models()

    @staticmethod
    def rental_cost(plate: str, days, *, store: Optional["Store"] = None) -> dict:
        """Quote renting the vehicle with `plate` for `days` days, or raise VehicleNotFoundError."""
        n = _days(days)
        st = store or _store()
        with st.read() as agency:
            v = agency.find(plate)
            if v is None:
                raise VehicleNotFoundError(f"Error: vehicle with plate '{plate}' not found")
            return {
                "vehicle": vehicle_to_dict(v),
                "days": n,
                "cost": round2(v.rental_cost(n)),
            }

    @staticmethod
    def load_lines(lines: Iterable[str], *, store: Optional["Store"] = None) -> dict:
        """Load a batch of record lines; bad lines are reported, not fatal."""
        st = store or _store()
        result = st.load(lines)
        return {
            "loaded": result.loaded,
            "duplicates": result.duplicates,
            "failures": [asdict(f) for f in result.failures],
        }

    @staticmethod
    def add_line(line: str, *, store: Optional["Store"] = None):
        """
        Parse one record line and add it to the fleet.
        Returns (ok, message); a malformed line raises MalformedRecordError.
        """
        st = store or _store()
        with st.read() as agency:
            vehicle = agency.parse_line(line or "")
        if not st.add(vehicle):
            return False, f"Vehicle {vehicle.plate} already in fleet"
        logger.info("Added %s %s", type(vehicle).__name__, vehicle.plate)
        return True, f"Vehicle {vehicle.plate} added"
