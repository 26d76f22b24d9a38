from typing import Dict, Any, List, Callable, Optional
from datetime import datetime, time, timedelta
from agents.base_agent import BaseAgent
from agents.errors import InvalidArgumentError, UnauthenticatedError
from agents.itinerary.templates import (
    ActivityTemplate,
    DestinationScript,
    GENERIC_ACTIVITIES,
    GENERIC_ACTIVITIES_PER_DAY,
    GENERIC_DURATION_HOURS,
    GENERIC_SLOT_HOURS,
    match_destination,
    parse_day_count,
)
from models.travel_models import ItineraryResponse, ScheduledActivity

MIN_PROMPT_LENGTH = 5
DAY_START_HOUR = 9


def local_now() -> datetime:
    return datetime.now()


class ItineraryAgent(BaseAgent):
    """
    Mock itinerary generator.

    Picks a hand-authored destination script by keyword, or builds a generic
    day-by-day plan when no destination is recognised.
    """

    unauthenticated_message = "You must be logged in to generate an itinerary."

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        super().__init__("ItineraryAgent")
        self.clock = clock or local_now

    async def execute(self, input_data: Dict[str, Any]) -> ItineraryResponse:
        """
        Input:
        - prompt: Free-text trip description
        - authenticated: Whether the caller presented an identity
        """
        if not input_data.get("authenticated"):
            raise UnauthenticatedError(self.unauthenticated_message)

        prompt = (input_data.get("prompt") or "").lower().strip()
        if len(prompt) < MIN_PROMPT_LENGTH:
            raise InvalidArgumentError("Please provide a valid prompt (at least 5 characters).")

        self.log("Generating itinerary", prompt=prompt)

        itinerary = self.generate(prompt)

        self.log(f"Generated {len(itinerary)} itinerary items", item_count=len(itinerary))
        return ItineraryResponse(itinerary=itinerary)

    def generate(self, prompt: str) -> List[ScheduledActivity]:
        base_date = self.reference_start()

        script = match_destination(prompt)
        if script is not None:
            self.log("Matched destination script", destination=script.name)
            return self._from_script(script, base_date)

        return self._generic_itinerary(prompt, base_date)

    def reference_start(self) -> datetime:
        """Tomorrow at 09:00 local time"""
        now = self.clock()
        start = datetime.combine(now.date() + timedelta(days=1), time(hour=DAY_START_HOUR), tzinfo=now.tzinfo)
        if start.tzinfo is None:
            # Offset comes from tomorrow's date so DST changes keep 09:00 local
            start = start.astimezone()
        return start

    def _from_script(self, script: DestinationScript, base_date: datetime) -> List[ScheduledActivity]:
        return [
            self._build_activity(
                template,
                start_time=base_date + timedelta(hours=template.start_hours),
                end_time=base_date + timedelta(hours=template.end_hours),
            )
            for template in script.activities
        ]

    def _generic_itinerary(self, prompt: str, base_date: datetime) -> List[ScheduledActivity]:
        num_days = parse_day_count(prompt)
        activities_per_day = min(len(GENERIC_ACTIVITIES), GENERIC_ACTIVITIES_PER_DAY)

        itinerary = []
        for day in range(num_days):
            for i in range(activities_per_day):
                start_time = base_date + timedelta(hours=day * 24 + i * GENERIC_SLOT_HOURS)
                itinerary.append(self._build_activity(
                    GENERIC_ACTIVITIES[i],
                    start_time=start_time,
                    end_time=start_time + timedelta(hours=GENERIC_DURATION_HOURS),
                    title_prefix=f"Day {day + 1}: ",
                ))

        return itinerary

    @staticmethod
    def _build_activity(template: ActivityTemplate, start_time: datetime, end_time: datetime,
                        title_prefix: str = "") -> ScheduledActivity:
        return ScheduledActivity(
            title=f"{title_prefix}{template.title}",
            type=template.type,
            location=template.location,
            start_time=start_time,
            end_time=end_time,
            description=template.description,
            notes=template.notes,
        )
