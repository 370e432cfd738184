# rental_agency/utils/constants.py

"""
Global constants for vehicle type tags and the record line format.
These constants are imported by both models and services.
"""


class VehicleType:
    CAR = "C"
    VAN = "F"


# --- Record lines ---
FIELD_SEPARATOR = ","
RECORD_FIELDS = 6  # tag, plate, brand, model, daily price, seats|cargo volume

DEFAULT_AGENCY_NAME = "Rental Agency"
