"""
Unit tests for the Store singleton: one agency per process, and a warning
when later callers ask for different settings.
"""

import logging

from rental_agency.models.store import Store


def test_instance_is_shared():
    a = Store.instance("First")
    assert Store.instance() is a
    assert a.agency.name == "First"


def test_differing_settings_are_logged_and_ignored(caplog):
    st = Store.instance("First", strict_tags=True)
    with caplog.at_level(logging.WARNING, logger="rental_agency.models.store"):
        assert Store.instance("Second", strict_tags=False) is st
    assert st.agency.name == "First"
    assert st.agency.strict_tags is True
    assert "ignoring" in caplog.text


def test_no_warning_without_explicit_settings(caplog):
    Store.instance("First", strict_tags=True)
    with caplog.at_level(logging.WARNING, logger="rental_agency.models.store"):
        Store.instance()
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
