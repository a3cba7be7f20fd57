"""
Tests for the per-listing filter evaluator.
"""
from datetime import datetime, timezone

import pytest

from auctions.testing import AS_OF, make_property, make_vehicle
from auctions.filters import in_range, is_active, matches
from auctions.models import PropertyCriteria, VehicleCriteria


def test_active_requires_future_end_date():
    assert is_active(make_property(), AS_OF)
    assert not is_active(make_property(end_date="2025-06-01T00:00:00Z"), AS_OF)
    # Exactly at as_of is not "strictly after"
    assert not is_active(make_property(end_date=AS_OF), AS_OF)


@pytest.mark.parametrize("end_date", [None, "", "not a date", "31/02/2025", 12345])
def test_unparseable_end_date_is_inactive(end_date):
    assert not is_active(make_property(end_date=end_date), AS_OF)


def test_inactive_record_excluded_even_if_everything_else_matches():
    record = make_property(end_date="2025-06-17T14:59:59Z")
    criteria = PropertyCriteria(state="SP", city="São Paulo", price=(0, 10_000_000))
    assert not matches(record, criteria, AS_OF)
    assert matches(make_property(), criteria, AS_OF)


def test_brazilian_date_format_is_parsed():
    # Naive local time (UTC-3): 18/06/2025 10:00 is after AS_OF
    assert is_active(make_property(end_date="18/06/2025 10:00:00"), AS_OF)


def test_category_mismatch():
    assert not matches(make_vehicle(), PropertyCriteria(), AS_OF)
    assert not matches(make_property(), VehicleCriteria(), AS_OF)


def test_sub_type_mapping():
    c = PropertyCriteria()
    assert matches(make_property(property_type="Apartment"), c, AS_OF, "apartments")
    assert matches(make_property(property_type="Apartamento"), c, AS_OF, "apartments")
    assert not matches(make_property(property_type="House"), c, AS_OF, "apartments")
    assert matches(make_property(property_type="House"), c, AS_OF, "all")


def test_unknown_sub_type_compares_literally():
    c = PropertyCriteria()
    assert matches(make_property(property_type="Castle"), c, AS_OF, "castle")
    assert not matches(make_property(property_type="House"), c, AS_OF, "castle")


def test_format_groups():
    auction = PropertyCriteria(format="auction")
    direct = PropertyCriteria(format="direct-sale")
    for fmt in ("In-person", "Online", "Hybrid", "Presencial"):
        assert matches(make_property(format=fmt), auction, AS_OF)
        assert not matches(make_property(format=fmt), direct, AS_OF)
    assert matches(make_property(format="Venda Direta"), direct, AS_OF)


def test_scalar_filters_ignore_all_sentinel_and_accents():
    record = make_property(city="São Paulo", state="SP")
    assert matches(record, PropertyCriteria(state="all", city="all"), AS_OF)
    assert matches(record, PropertyCriteria(state="sp", city="SAO PAULO"), AS_OF)
    assert not matches(record, PropertyCriteria(city="Santos"), AS_OF)
    assert not matches(record, PropertyCriteria(state="RJ"), AS_OF)


def test_vehicle_scalar_filters():
    record = make_vehicle(brand="Volkswagen", model="Gol", color="Branco")
    assert matches(record, VehicleCriteria(brand="volkswagen", model="GOL", color="branco"), AS_OF)
    assert not matches(record, VehicleCriteria(brand="Fiat"), AS_OF)
    assert not matches(record, VehicleCriteria(color="Preto"), AS_OF)


def test_multi_select_origin_and_stage():
    record = make_property(origin="Particular", stage="2ª Praça")
    assert matches(record, PropertyCriteria(origin=("private", "judicial")), AS_OF)
    assert not matches(record, PropertyCriteria(origin=("judicial",)), AS_OF)
    assert matches(record, PropertyCriteria(stage=("second",)), AS_OF)
    assert not matches(record, PropertyCriteria(stage=("first", "third")), AS_OF)
    # Unmapped labels are compared as-is
    assert matches(record, PropertyCriteria(origin=("Particular",)), AS_OF)


def test_price_range_is_inclusive():
    record = make_property(initial_bid_value=150000)
    assert matches(record, PropertyCriteria(price=(150000, 200000)), AS_OF)
    assert matches(record, PropertyCriteria(price=(100000, 150000)), AS_OF)
    assert not matches(record, PropertyCriteria(price=(150001, 200000)), AS_OF)


def test_inverted_or_malformed_range_matches_nothing():
    record = make_property(initial_bid_value=150000)
    assert not matches(record, PropertyCriteria(price=(200000, 100000)), AS_OF)
    assert not matches(record, PropertyCriteria(price=(0, float("nan"))), AS_OF)
    assert not in_range(5, None)
    assert not in_range(5, (1, 2, 3))


def test_area_and_year_only_apply_when_present():
    assert not matches(make_property(useful_area_m2=500), PropertyCriteria(area=(0, 100)), AS_OF)
    assert matches(make_property(useful_area_m2=None), PropertyCriteria(area=(0, 100)), AS_OF)
    assert not matches(make_vehicle(year=1985), VehicleCriteria(year=(1990, 2025)), AS_OF)
    assert matches(make_vehicle(year=None), VehicleCriteria(year=(1990, 2025)), AS_OF)


def test_naive_as_of_is_accepted():
    naive = datetime(2025, 6, 17, 12, 0)
    assert matches(make_property(end_date=datetime(2025, 7, 1, tzinfo=timezone.utc)), PropertyCriteria(), naive)
