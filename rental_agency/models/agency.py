from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from ..exceptions import InvalidVehicleError, MalformedRecordError, UnknownVehicleTypeError
from ..utils.constants import FIELD_SEPARATOR, RECORD_FIELDS, VehicleType
from .vehicle import VEHICLE_CLASSES, Car, Van, VehicleBase

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 53


@dataclass
class LineFailure:
    """One rejected record line: 1-based position, raw text and reason."""
    line_no: int
    line: str
    reason: str


@dataclass
class LoadResult:
    """Outcome of a batch load. Each line succeeds or fails on its own."""
    loaded: int = 0
    duplicates: int = 0
    failures: List[LineFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class Agency:
    """
    A rental agency and its fleet.

    The fleet keeps insertion order and never holds two equal vehicles
    (same variant, same plate). Queries return new lists; the fleet itself
    is only ever appended to.
    """

    def __init__(self, name: str, strict_tags: bool = False):
        self.name = name
        self.strict_tags = strict_tags
        self.fleet: List[VehicleBase] = []

    def __len__(self) -> int:
        return len(self.fleet)

    def __iter__(self) -> Iterator[VehicleBase]:
        return iter(self.fleet)

    # ---------- Building the fleet ----------
    def insert(self, vehicle: VehicleBase) -> bool:
        """Add `vehicle` unless an equal one is already present. Return True if added."""
        if vehicle in self.fleet:
            logger.debug("Duplicate %s %s dropped", type(vehicle).__name__, vehicle.plate)
            return False
        self.fleet.append(vehicle)
        return True

    def parse_line(self, line: str) -> VehicleBase:
        """
        Build a vehicle from a record line:
            C,<plate>,<brand>,<model>,<daily price>,<seats>
            F,<plate>,<brand>,<model>,<daily price>,<cargo volume>
        Fields are trimmed. Tag C (any case) makes a Car; any other tag makes
        a Van unless `strict_tags` is on, in which case only C and F pass.
        Raise MalformedRecordError on anything that cannot be parsed.
        """
        fields = [f.strip() for f in line.split(FIELD_SEPARATOR)]
        if len(fields) != RECORD_FIELDS:
            raise MalformedRecordError(
                f"Error: expected {RECORD_FIELDS} fields, got {len(fields)}")

        tag, plate, brand, model, price_raw, extra_raw = fields
        if not plate or not brand or not model:
            raise MalformedRecordError("Error: plate, brand and model are required")

        tag = tag.upper()
        if self.strict_tags and tag not in VEHICLE_CLASSES:
            raise UnknownVehicleTypeError(f"Error: unknown vehicle type tag '{tag}'")
        is_car = tag == VehicleType.CAR

        try:
            price = float(price_raw)
            extra = int(extra_raw) if is_car else float(extra_raw)
        except ValueError as e:
            raise MalformedRecordError(f"Error: non-numeric value in record ({e})") from e

        try:
            if is_car:
                return Car(plate, brand, model, price, seats=extra)
            return Van(plate, brand, model, price, cargo_volume=extra)
        except InvalidVehicleError as e:
            raise MalformedRecordError(e.message) from e

    def load_fleet(self, lines: Iterable[str]) -> LoadResult:
        """
        Parse and insert every line. A bad line is recorded and skipped; the
        rest of the batch still loads. Blank lines are ignored.
        """
        result = LoadResult()
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                vehicle = self.parse_line(line)
            except MalformedRecordError as e:
                logger.warning("Rejected line %d (%r): %s", line_no, line, e.message)
                result.failures.append(LineFailure(line_no, line, e.message))
                continue
            if self.insert(vehicle):
                result.loaded += 1
            else:
                result.duplicates += 1

        logger.info("Agency %s loaded: added=%d, duplicates=%d, rejected=%d, total=%d",
                    self.name, result.loaded, result.duplicates, len(result.failures), len(self.fleet))
        return result

    # ---------- Queries ----------
    def find(self, plate: str) -> Optional[VehicleBase]:
        """First vehicle with this plate (case-insensitive), or None."""
        key = (plate or "").strip().casefold()
        for v in self.fleet:
            if v.plate.casefold() == key:
                return v
        return None

    def cars(self) -> List[Car]:
        return [v for v in self.fleet if v.kind == VehicleType.CAR]

    def vans(self) -> List[Van]:
        return [v for v in self.fleet if v.kind == VehicleType.VAN]

    def cars_report(self, days: int) -> str:
        """Every car in fleet order with what renting it for `days` days costs."""
        parts = []
        for car in self.cars():
            parts.append(str(car))
            parts.append(f"Rental cost for {days} days: {car.rental_cost(days):.2f}")
            parts.append(SEPARATOR)
        return "\n".join(parts)

    def cars_sorted_by_plate(self) -> List[Car]:
        # TODO: apply the "more than 4 seats" filter once the agency confirms it is wanted
        return sorted(self.cars())

    def vans_sorted_by_volume(self) -> List[Van]:
        return sorted(self.vans(), key=lambda v: v.cargo_volume)

    def brands_with_models(self) -> dict[str, list[str]]:
        """Brands in alphabetical order, each with its distinct models sorted."""
        groups = defaultdict(set)
        for v in self.fleet:
            groups[v.brand].add(v.model)
        return {brand: sorted(models) for brand, models in sorted(groups.items())}

    def __str__(self) -> str:
        lines = [f"Vehicles for rent at agency {self.name}", f"Total vehicles: {len(self.fleet)}"]
        for v in self.fleet:
            lines.append(str(v))
            lines.append(SEPARATOR)
        return "\n".join(lines)
