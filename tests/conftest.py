import sys, os, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from rental_agency import create_app
from rental_agency.models.agency import Agency
from rental_agency.models.store import Store


SAMPLE_LINES = [
    "C,4532MNT,Seat,Ibiza,35.5,5",
    "F,9999ZZZ,Ford,Transit,60,12.5",
    "C,1234ABC,Seat,Leon,42,5",
    "F,3344GHJ,Renault,Master,75,10.8",
]


@pytest.fixture(autouse=True)
def reset_store_between_tests():
    """Every test starts from a fresh, empty singleton Store."""
    Store.reset()
    yield
    Store.reset()


@pytest.fixture
def agency():
    return Agency("Test Agency")


@pytest.fixture
def store():
    st = Store.instance("Test Agency")
    st.load(SAMPLE_LINES)
    return st


@pytest.fixture
def client():
    """Flask test client with the sample fleet loaded at start-up."""
    app = create_app({"TESTING": True, "AGENCY_NAME": "Test Agency", "FLEET_LINES": SAMPLE_LINES})
    with app.test_client() as c:
        yield c
