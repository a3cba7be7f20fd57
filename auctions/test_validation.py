"""
Tests for type guards and coercion of untrusted data.
"""
import math

import pytest

from auctions.testing import make_property
from auctions.models import PropertyCriteria, PropertyListing, VehicleCriteria, VehicleListing
from auctions.validation import (
    CriteriaError, criteria_from_mapping, criteria_to_dict, is_listing_record,
    is_numeric_range, is_string_array, listing_from_mapping,
)


def test_is_listing_record_accepts_instances_and_mappings():
    assert is_listing_record(make_property())
    assert is_listing_record({"id": "1", "kind": "vehicle", "url": "https://x"})
    # Feed-style keys
    assert is_listing_record({"_id": "1", "type": "property", "image": "i.jpg"})


@pytest.mark.parametrize("raw", [
    {"id": "", "kind": "property", "image": "i.jpg"},
    {"id": "   ", "kind": "property", "image": "i.jpg"},
    {"id": "1", "kind": "boat", "image": "i.jpg"},
    {"id": "1", "kind": "property"},
    {"id": 1, "kind": "property", "image": "i.jpg"},
    "not a record",
    None,
])
def test_is_listing_record_rejects_malformed(raw):
    assert not is_listing_record(raw)


def test_is_numeric_range():
    assert is_numeric_range([0, 10])
    assert is_numeric_range((10.5, 2))  # inverted is still a range
    assert not is_numeric_range([0])
    assert not is_numeric_range([0, "10"])
    assert not is_numeric_range([0, math.nan])
    assert not is_numeric_range([True, 10])
    assert not is_numeric_range(None)


def test_is_string_array():
    assert is_string_array([])
    assert is_string_array(["a", "b"])
    assert not is_string_array(["a", 1])
    assert not is_string_array("ab")


def test_listing_from_mapping_builds_variants():
    prop = listing_from_mapping({
        "_id": "1", "type": "property", "image": "i.jpg",
        "property_type": "Apartamento", "useful_area_m2": "85",
        "property_address": "Av. Paulista, 1000", "city": " São  Paulo ",
        "state": "SP", "initial_bid_value": "180000", "website": "Leiloeira ABC",
        "updated": "2025-06-15T12:00:00.000Z", "data_scraped": "2025-06-17T12:00:00.000Z",
        "docs": ["Matrícula"], "unknown_key": "ignored",
    })
    assert isinstance(prop, PropertyListing)
    assert prop.useful_area_m2 == 85.0
    assert prop.address == "Av. Paulista, 1000"
    assert prop.city == "São Paulo"
    assert prop.source_site == "Leiloeira ABC"
    assert prop.initial_bid_value == 180000.0
    assert prop.docs == ["Matrícula"]

    veh = listing_from_mapping({"id": "2", "kind": "vehicle", "url": "u", "year": "2019", "appraised_value": "n/a"})
    assert isinstance(veh, VehicleListing)
    assert veh.year == 2019
    assert veh.appraised_value is None


def test_listing_from_mapping_degrades_wrong_types():
    veh = listing_from_mapping({
        "id": "3", "type": "vehicle", "url": "u", "image": 42,
        "website": 42, "origin": 7, "stage": ["1st"], "format": None,
        "vehicle_type": 1, "updated": 1718000000000, "end_date": {"at": "soon"},
        "data_scraped": "2025-06-17T12:00:00.000Z",
    })
    assert veh is not None
    assert veh.image == ""
    assert veh.source_site == ""
    assert veh.origin == ""
    assert veh.stage == ""
    assert veh.format == ""
    assert veh.vehicle_type == ""
    assert veh.updated_at is None
    assert veh.end_date is None
    assert veh.scraped_at == "2025-06-17T12:00:00.000Z"


def test_listing_from_mapping_floors_negative_bid():
    prop = listing_from_mapping({
        "id": "4", "kind": "property", "url": "u",
        "initial_bid_value": -5000, "appraised_value": 10000,
    })
    assert prop.initial_bid_value == 0.0


def test_listing_from_mapping_rejects_invalid():
    assert listing_from_mapping({"id": "1", "kind": "property"}) is None


def test_criteria_from_mapping_merges_onto_base():
    base = PropertyCriteria(state="SP", price=(0, 100))
    c = criteria_from_mapping("property", {"city": "Santos", "origin": ["judicial"], "area": [10, 50]}, base)
    assert c == PropertyCriteria(state="SP", city="Santos", origin=("judicial",), price=(0, 100), area=(10, 50))


@pytest.mark.parametrize("data", [
    {"price": [0]},
    {"price": "cheap"},
    {"origin": "judicial"},
    {"state": 35},
    {"brand": "Fiat"},  # vehicle-only field
])
def test_criteria_from_mapping_rejects_bad_shapes(data):
    with pytest.raises(CriteriaError):
        criteria_from_mapping("property", data)


def test_criteria_from_mapping_unknown_category():
    with pytest.raises(CriteriaError):
        criteria_from_mapping("boats", {})


def test_criteria_to_dict_uses_lists():
    d = criteria_to_dict(VehicleCriteria(brand="Fiat", year=(2000, 2010), origin=("judicial",)))
    assert d["year"] == [2000, 2010]
    assert d["origin"] == ["judicial"]
    assert d["brand"] == "Fiat"
