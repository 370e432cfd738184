from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from ..exceptions import InvalidVehicleError
from ..utils.constants import VehicleType


def _check_amount(label: str, value) -> None:
    """Amounts stored on a vehicle must be finite and non-negative."""
    if not math.isfinite(value) or value < 0:
        raise InvalidVehicleError(
            f"Error: {label} must be a finite, non-negative number (got {value})")


@dataclass(eq=False)
class VehicleBase:
    """
    Base vehicle model. Plate, brand and model are stored uppercase; the plate
    is the identity key. Two vehicles are equal only when they are the same
    variant and share a plate (case-insensitive), so a Car and a Van may carry
    the same plate string.
    """
    plate: str
    brand: str
    model: str
    daily_price: float

    kind: ClassVar[str] = ""

    def __post_init__(self):
        self.plate = self.plate.upper()
        self.brand = self.brand.upper()
        self.model = self.model.upper()
        _check_amount("daily price", self.daily_price)

    def rental_cost(self, days: int) -> float:
        """
        Cost of renting the vehicle for `days` days at the listed daily price.
        `days` is not validated here; callers own that check.
        """
        return self.daily_price * days

    def _plate_key(self) -> str:
        return self.plate.casefold()

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if other is None or type(other) is not type(self):
            return False
        return self._plate_key() == other._plate_key()

    def __hash__(self) -> int:
        return hash(self._plate_key())

    def __lt__(self, other: VehicleBase) -> bool:
        if not isinstance(other, VehicleBase):
            return NotImplemented
        return self._plate_key() < other._plate_key()

    def _detail(self) -> str:
        return ""

    def __str__(self) -> str:
        lines = [
            type(self).__name__.upper(),
            f"Plate: {self.plate} | Brand: {self.brand} | Model: {self.model}",
            f"Daily price: {self.daily_price:.2f} | {self._detail()}",
        ]
        return "\n".join(lines)


@dataclass(eq=False)
class Car(VehicleBase):
    """
    Cars add a seat count and follow the base pricing rule.
    """
    seats: int = 0

    kind: ClassVar[str] = VehicleType.CAR

    def __post_init__(self):
        super().__post_init__()
        if self.seats < 0:
            raise InvalidVehicleError(f"Error: seats must not be negative (got {self.seats})")

    def _detail(self) -> str:
        return f"Seats: {self.seats}"


@dataclass(eq=False)
class Van(VehicleBase):
    """
    Vans add a cargo volume (cubic metres) and follow the base pricing rule.
    """
    cargo_volume: float = 0.0

    kind: ClassVar[str] = VehicleType.VAN

    def __post_init__(self):
        super().__post_init__()
        _check_amount("cargo volume", self.cargo_volume)

    def _detail(self) -> str:
        return f"Cargo volume: {self.cargo_volume}"


VEHICLE_CLASSES = {
    VehicleType.CAR: Car,
    VehicleType.VAN: Van,
}
