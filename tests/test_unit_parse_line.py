"""
Unit tests for Agency.parse_line: variant selection by type tag, trimming,
and rejection of malformed records.
"""

import pytest

from rental_agency.exceptions import MalformedRecordError, UnknownVehicleTypeError
from rental_agency.models.agency import Agency
from rental_agency.models.vehicle import Car, Van


def test_parse_car(agency):
    v = agency.parse_line("C,1234ABC,Seat,Ibiza,35.5,5")
    assert isinstance(v, Car)
    assert (v.plate, v.brand, v.model, v.daily_price, v.seats) == ("1234ABC", "SEAT", "IBIZA", 35.5, 5)


def test_parse_van(agency):
    v = agency.parse_line("F,9999ZZZ,Ford,Transit,60,12.5")
    assert isinstance(v, Van)
    assert v.cargo_volume == 12.5
    assert v.daily_price == 60.0


def test_lowercase_car_tag(agency):
    assert isinstance(agency.parse_line("c,1234ABC,Seat,Ibiza,35.5,5"), Car)


def test_fields_are_trimmed(agency):
    v = agency.parse_line("  C , 1234abc ,  Seat , Ibiza ,35.5 , 5 ")
    assert isinstance(v, Car)
    assert (v.plate, v.brand, v.model, v.seats) == ("1234ABC", "SEAT", "IBIZA", 5)


def test_unknown_tag_falls_through_to_van(agency):
    v = agency.parse_line("X,9999ZZZ,Ford,Transit,60,12.5")
    assert isinstance(v, Van)


def test_unknown_tag_rejected_in_strict_mode():
    strict = Agency("Strict", strict_tags=True)
    assert isinstance(strict.parse_line("f,9999ZZZ,Ford,Transit,60,12.5"), Van)
    with pytest.raises(UnknownVehicleTypeError):
        strict.parse_line("X,9999ZZZ,Ford,Transit,60,12.5")


@pytest.mark.parametrize("line", [
    "C,1234ABC,Seat,Ibiza,35.5",
    "C,1234ABC,Seat,Ibiza,35.5,5,extra",
    "C,1234ABC,Seat,Ibiza,cheap,5",
    "C,1234ABC,Seat,Ibiza,35.5,five",
    "C,1234ABC,Seat,Ibiza,35.5,5.5",
    "F,9999ZZZ,Ford,Transit,60,big",
    "C,,Seat,Ibiza,35.5,5",
    "C,1234ABC,Seat,Ibiza,-10,5",
    "C,1234ABC,Seat,Ibiza,nan,5",
    "C,1234ABC,Seat,Ibiza,35.5,-2",
    "F,9999ZZZ,Ford,Transit,60,nan",
    "F,9999ZZZ,Ford,Transit,60,inf",
    "F,9999ZZZ,Ford,Transit,60,-3",
    "",
])
def test_malformed_lines_raise(agency, line):
    with pytest.raises(MalformedRecordError):
        agency.parse_line(line)
