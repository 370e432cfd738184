"""Shared service helpers and mappers."""

from typing import Optional

from rental_agency.models.store import Store
from rental_agency.models.vehicle import VehicleBase


def _store() -> Store:
    """Get the singleton store instance."""
    return Store.instance()


def round2(x: float) -> float:
    return round(float(x), 2)


def to_int_safe(value) -> Optional[int]:
    """Safely convert to int; return None if invalid."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


# -------- rich model -> dict mappers --------
def vehicle_to_dict(v: VehicleBase) -> dict:
    """Map a vehicle to a plain dict for JSON responses."""
    d = {
        "type": type(v).__name__.lower(),
        "plate": v.plate,
        "brand": v.brand,
        "model": v.model,
        "daily_price": v.daily_price,
    }
    for name in ("seats", "cargo_volume"):
        if hasattr(v, name):
            d[name] = getattr(v, name)
    return d
