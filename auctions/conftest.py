"""
Shared fixtures for engine tests.
"""
import pytest

from auctions.testing import AS_OF, make_property, make_vehicle


@pytest.fixture
def as_of():
    return AS_OF


@pytest.fixture
def catalog():
    return [
        make_property("p1", initial_bid_value=100000, source_site="Site A"),
        make_property("p2", initial_bid_value=200000, property_type="House", source_site="Site B"),
        make_property("p3", initial_bid_value=300000, city="Curitiba", state="PR", source_site="Site A"),
        make_vehicle("v1"),
        make_vehicle("v2", vehicle_type="Motorcycle", brand="Honda", model="CG 160", year=2021),
    ]
