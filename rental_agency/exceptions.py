"""
Custom exception classes for the rental agency fleet.

These exceptions provide precise error types that the web layer can catch
to return a clear 4xx response instead of a generic 500 error.
"""


class MalformedRecordError(Exception):
    """Raised when a fleet record line cannot be turned into a vehicle."""

    def __init__(self, message: str = "Error: malformed vehicle record") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnknownVehicleTypeError(MalformedRecordError):
    """Raised in strict mode when a record carries a type tag other than C or F."""

    def __init__(self, message: str = "Error: unknown vehicle type tag") -> None:
        super().__init__(message)


class InvalidVehicleError(Exception):
    """Raised when vehicle data breaks a model rule (e.g. a negative daily price)."""

    def __init__(self, message: str = "Error: invalid vehicle data") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class VehicleNotFoundError(Exception):
    """Raised when a plate cannot be found in the fleet."""

    def __init__(self, message: str = "Error: vehicle not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidDaysError(Exception):
    """Raised when a rental length is missing, not an integer, or negative."""

    def __init__(self, message: str = "Error: invalid number of days") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
