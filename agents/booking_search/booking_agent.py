from typing import Dict, Any, Callable, List, Optional
from datetime import datetime, timezone
from agents.base_agent import BaseAgent
from agents.booking_search.catalogs import CATALOGS, SUPPORTED_TYPES, materialize
from agents.errors import InvalidArgumentError, UnauthenticatedError
from models.travel_models import (
    BookingResult,
    BookingSearchResponse,
    BookingType,
    BusResult,
    FlightResult,
    HotelResult,
)

RESULT_MODELS = {
    BookingType.FLIGHT: FlightResult,
    BookingType.HOTEL: HotelResult,
    BookingType.BUS: BusResult,
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BookingSearchAgent(BaseAgent):
    unauthenticated_message = "You must be logged in to search bookings."

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        super().__init__("BookingSearchAgent")
        self.clock = clock or utc_now

    async def execute(self, input_data: Dict[str, Any]) -> BookingSearchResponse:
        """
        Mock booking search over the static catalogs

        Input:
        - type: flight/hotel/bus
        - query: Free-text search, echoed back but not used for filtering
        - authenticated: Whether the caller presented an identity
        """
        if not input_data.get("authenticated"):
            raise UnauthenticatedError(self.unauthenticated_message)

        search_type = input_data.get("type")
        query = input_data.get("query")

        self.log(f"Booking search request: {search_type} - {query}", search_type=search_type)

        if not search_type or not query:
            raise InvalidArgumentError("Both type and query are required for booking search.")

        booking_type = self._parse_type(search_type)

        now = self.clock()
        results = self.search(booking_type, now)

        self.log(f"Returning {len(results)} results for {booking_type.value} search",
                 result_count=len(results))

        return BookingSearchResponse(
            results=results,
            search_query=query,
            search_type=booking_type,
            timestamp=now,
        )

    def search(self, booking_type: BookingType, now: datetime) -> List[BookingResult]:
        model = RESULT_MODELS[booking_type]
        return [model(**materialize(entry, booking_type, now)) for entry in CATALOGS[booking_type]]

    @staticmethod
    def _parse_type(search_type: Any) -> BookingType:
        try:
            return BookingType(search_type)
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid booking type. Supported types: {', '.join(SUPPORTED_TYPES)}"
            )
