from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


def to_iso_timestamp(value: datetime) -> str:
    """Serialize a datetime as UTC ISO-8601 with milliseconds and a Z suffix"""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActivityType(str, Enum):
    TRANSPORT = "transport"
    DINING = "dining"
    ACTIVITY = "activity"
    SIGHTSEEING = "sightseeing"
    BUSINESS = "business"
    SHOPPING = "shopping"


class BookingType(str, Enum):
    FLIGHT = "flight"
    HOTEL = "hotel"
    BUS = "bus"


# Itinerary

class ScheduledActivity(CamelModel):
    title: str = Field(..., description="Display title, prefixed with a day label in multi-day plans")
    type: ActivityType = Field(..., description="Activity category")
    location: str = Field(..., description="Free-text place description")
    start_time: datetime = Field(..., description="Activity start")
    end_time: datetime = Field(..., description="Activity end, always after start")
    description: str = ""
    notes: str = ""

    @field_serializer("start_time", "end_time")
    def _serialize_time(self, value: datetime) -> str:
        return to_iso_timestamp(value)


class ItineraryRequest(CamelModel):
    prompt: Optional[str] = None


class ItineraryResponse(CamelModel):
    itinerary: List[ScheduledActivity] = []


# Booking search

class FlightResult(CamelModel):
    id: str
    title: str
    from_: str = Field(..., alias="from")
    to: str
    price: float
    currency: str = "INR"
    departure_time: datetime
    arrival_time: datetime
    duration: str
    airline: str
    aircraft: str
    booking_class: str

    @field_serializer("departure_time", "arrival_time")
    def _serialize_time(self, value: datetime) -> str:
        return to_iso_timestamp(value)


class BusResult(CamelModel):
    id: str
    title: str
    from_: str = Field(..., alias="from")
    to: str
    price: float
    currency: str = "INR"
    departure_time: datetime
    arrival_time: datetime
    duration: str
    operator: str
    bus_type: str
    amenities: List[str] = []

    @field_serializer("departure_time", "arrival_time")
    def _serialize_time(self, value: datetime) -> str:
        return to_iso_timestamp(value)


class HotelResult(CamelModel):
    id: str
    title: str
    location: str
    price_per_night: float
    currency: str = "INR"
    check_in_date: datetime
    check_out_date: datetime
    rating: float
    amenities: List[str] = []
    room_type: str
    description: str = ""

    @field_serializer("check_in_date", "check_out_date")
    def _serialize_time(self, value: datetime) -> str:
        return to_iso_timestamp(value)


BookingResult = Union[FlightResult, HotelResult, BusResult]


class BookingSearchRequest(CamelModel):
    type: Optional[str] = None
    query: Optional[str] = None


class BookingSearchResponse(CamelModel):
    results: List[BookingResult] = []
    search_query: str
    search_type: BookingType
    timestamp: datetime

    @field_serializer("timestamp")
    def _serialize_time(self, value: datetime) -> str:
        return to_iso_timestamp(value)


# Dialogflow webhook

def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


class WebhookRequest(CamelModel):
    """
    The parts of a Dialogflow fulfillment request the webhook reads.

    Built with from_payload, which never fails: any field with an unexpected
    shape is treated as absent.
    """
    intent_name: Optional[str] = None
    parameters: Dict[str, Any] = {}

    @classmethod
    def from_payload(cls, payload: Any) -> "WebhookRequest":
        query_result = _as_dict(_as_dict(payload).get("queryResult"))
        display_name = _as_dict(query_result.get("intent")).get("displayName")
        return cls(
            intent_name=display_name if isinstance(display_name, str) else None,
            parameters=_as_dict(query_result.get("parameters")),
        )

    def parameter(self, name: str) -> Any:
        return self.parameters.get(name)


class FulfillmentResponse(CamelModel):
    fulfillment_text: str
