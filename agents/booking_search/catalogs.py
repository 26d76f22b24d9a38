"""
Static booking catalogs.

Each entry stores its dates as offsets from the moment of the search so the
mock results always lie in the future.
"""

from datetime import timedelta
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Tuple

from models.travel_models import BookingType


class CatalogEntry(NamedTuple):
    """Literal result fields plus the offsets of its two date fields"""
    fields: Mapping[str, Any]
    start_offset: timedelta
    end_offset: timedelta


def _entry(start_offset: timedelta, end_offset: timedelta, **fields: Any) -> CatalogEntry:
    return CatalogEntry(MappingProxyType(fields), start_offset, end_offset)


FLIGHTS: Tuple[CatalogEntry, ...] = (
    _entry(
        timedelta(days=2), timedelta(days=2, hours=2),
        id="FL-101", title="IndiGo 6E-204", from_="Delhi (DEL)", to="Goa (GOI)",
        price=4500.0, currency="INR", duration="2h 15m", airline="IndiGo",
        aircraft="Airbus A320", booking_class="Economy",
    ),
    _entry(
        timedelta(days=2, hours=1), timedelta(days=2, hours=3),
        id="FL-102", title="Vistara UK-847", from_="Delhi (DEL)", to="Goa (GOI)",
        price=5200.0, currency="INR", duration="2h 30m", airline="Vistara",
        aircraft="Boeing 737", booking_class="Premium Economy",
    ),
    _entry(
        timedelta(days=3), timedelta(days=3, hours=2, minutes=15),
        id="FL-103", title="SpiceJet SG-8456", from_="Delhi (DEL)", to="Goa (GOI)",
        price=3800.0, currency="INR", duration="2h 15m", airline="SpiceJet",
        aircraft="Boeing 737", booking_class="Economy",
    ),
)

HOTELS: Tuple[CatalogEntry, ...] = (
    _entry(
        timedelta(days=2), timedelta(days=5),
        id="HO-101", title="Taj Exotica Resort & Spa", location="Benaulim, Goa",
        price_per_night=15000.0, currency="INR", rating=4.8,
        amenities=("Wi-Fi", "Pool", "Spa", "Beach Access", "Restaurant"),
        room_type="Deluxe Sea View Room",
        description="Luxury beachfront resort with world-class amenities",
    ),
    _entry(
        timedelta(days=2), timedelta(days=5),
        id="HO-102", title="Grand Hyatt Goa", location="Bambolim, Goa",
        price_per_night=12000.0, currency="INR", rating=4.6,
        amenities=("Wi-Fi", "Pool", "Gym", "Spa", "Business Center"),
        room_type="King Room",
        description="Modern luxury hotel with excellent facilities",
    ),
    _entry(
        timedelta(days=2), timedelta(days=5),
        id="HO-103", title="The Leela Goa", location="Cavelossim, Goa",
        price_per_night=18000.0, currency="INR", rating=4.9,
        amenities=("Wi-Fi", "Pool", "Spa", "Golf Course", "Beach Access", "Fine Dining"),
        room_type="Premier Room",
        description="Ultra-luxury resort with pristine beach and premium services",
    ),
)

BUSES: Tuple[CatalogEntry, ...] = (
    _entry(
        timedelta(days=1), timedelta(days=1, hours=12),
        id="BU-101", title="Volvo A/C Sleeper", from_="Delhi", to="Goa",
        price=1200.0, currency="INR", duration="12h 30m", operator="RedBus",
        bus_type="A/C Sleeper",
        amenities=("Wi-Fi", "Charging Point", "Entertainment", "Blanket"),
    ),
    _entry(
        timedelta(days=1, hours=1), timedelta(days=1, hours=11),
        id="BU-102", title="Mercedes Multi-Axle", from_="Delhi", to="Goa",
        price=1500.0, currency="INR", duration="11h 45m", operator="Travels India",
        bus_type="A/C Semi-Sleeper",
        amenities=("Wi-Fi", "Charging Point", "Water Bottle", "Snacks"),
    ),
)

CATALOGS: Mapping[BookingType, Tuple[CatalogEntry, ...]] = MappingProxyType({
    BookingType.FLIGHT: FLIGHTS,
    BookingType.HOTEL: HOTELS,
    BookingType.BUS: BUSES,
})

# Names of the start/end date fields per booking type
DATE_FIELDS: Mapping[BookingType, Tuple[str, str]] = MappingProxyType({
    BookingType.FLIGHT: ("departure_time", "arrival_time"),
    BookingType.HOTEL: ("check_in_date", "check_out_date"),
    BookingType.BUS: ("departure_time", "arrival_time"),
})

SUPPORTED_TYPES: Tuple[str, ...] = tuple(booking_type.value for booking_type in BookingType)


def materialize(entry: CatalogEntry, booking_type: BookingType, now) -> Dict[str, Any]:
    """Concrete result fields for one catalog entry relative to ``now``"""
    start_field, end_field = DATE_FIELDS[booking_type]
    result = dict(entry.fields)
    if "amenities" in result:
        result["amenities"] = list(result["amenities"])
    result[start_field] = now + entry.start_offset
    result[end_field] = now + entry.end_offset
    return result
