"""
Listing builders and a fixed clock shared by the test suites.
"""
from datetime import datetime, timezone

from .models import PropertyListing, VehicleListing

AS_OF = datetime(2025, 6, 17, 15, 0, tzinfo=timezone.utc)


def make_property(id="p1", **kw):
    data = dict(
        image="https://img.example.com/p.jpg",
        url="https://example.com/p",
        property_type="Apartment",
        useful_area_m2=85,
        address="Av. Paulista, 1000",
        city="São Paulo",
        state="SP",
        initial_bid_value=180000,
        appraised_value=220000,
        origin="Judicial",
        stage="1st round",
        format="In-person",
        end_date="2025-07-25T16:00:00.000Z",
        updated_at="2025-06-15T12:00:00.000Z",
        scraped_at="2025-06-10T12:00:00.000Z",
        source_site="Auctioneer ABC",
    )
    data.update(kw)
    return PropertyListing(id=id, **data)


def make_vehicle(id="v1", **kw):
    data = dict(
        image="https://img.example.com/v.jpg",
        url="https://example.com/v",
        vehicle_type="Car",
        brand="Toyota",
        model="Corolla",
        color="Prata",
        year=2020,
        city="Belo Horizonte",
        state="MG",
        initial_bid_value=45000,
        appraised_value=60000,
        origin="Extrajudicial",
        stage="Single round",
        format="Online",
        end_date="2025-07-30T10:00:00.000Z",
        updated_at="2025-06-16T09:00:00.000Z",
        scraped_at="2025-06-10T09:00:00.000Z",
        source_site="Auctioneer XYZ",
    )
    data.update(kw)
    return VehicleListing(id=id, **data)
