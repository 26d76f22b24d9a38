#!/usr/bin/env python3
"""
Tests for the mock itinerary generator
"""

import asyncio
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from agents.errors import InvalidArgumentError, UnauthenticatedError
from agents.itinerary.itinerary_agent import ItineraryAgent
from agents.itinerary.templates import DESTINATION_SCRIPTS, match_destination, parse_day_count
from models.travel_models import ActivityType

IST = timezone(timedelta(hours=5, minutes=30))
FIXED_NOW = datetime(2026, 3, 10, 14, 30, 12, 345000, tzinfo=IST)


def make_agent():
    return ItineraryAgent(clock=lambda: FIXED_NOW)


def generate(prompt, authenticated=True):
    agent = make_agent()
    return asyncio.run(agent.run({"prompt": prompt, "authenticated": authenticated})).itinerary


def test_reference_start_is_tomorrow_nine_am():
    start = make_agent().reference_start()
    assert start == datetime(2026, 3, 11, 9, 0, 0, tzinfo=IST)


def test_reference_start_across_dst_change():
    new_york = ZoneInfo("America/New_York")
    # Clocks go forward overnight into 2026-03-08
    agent = ItineraryAgent(clock=lambda: datetime(2026, 3, 7, 20, 0, tzinfo=new_york))
    start = agent.reference_start()
    assert (start.year, start.month, start.day, start.hour, start.minute) == (2026, 3, 8, 9, 0)
    assert start.utcoffset() == timedelta(hours=-4)
    assert start.astimezone(timezone.utc).hour == 13


def test_reference_start_from_naive_local_clock():
    agent = ItineraryAgent(clock=lambda: datetime(2026, 6, 1, 23, 59))
    start = agent.reference_start()
    assert start.tzinfo is not None
    assert (start.month, start.day, start.hour, start.minute) == (6, 2, 9, 0)


@pytest.mark.parametrize("prompt, first_title, count", [
    ("Weekend in Goa please", "Arrive in Goa & Check-in", 4),
    ("kerala backwaters", "Backwater Cruise", 3),
    ("Business trip to Mumbai", "Visit Gateway of India", 3),
    ("forts of Jaipur", "Amber Fort Visit", 4),
    ("snow in manali", "Trek to Triund", 3),
    ("tech meetup in Bengaluru", "Cubbon Park Morning Walk", 4),
])
def test_destination_keywords_select_scripts(prompt, first_title, count):
    itinerary = generate(prompt)
    assert len(itinerary) == count
    assert itinerary[0].title == first_title


def test_keyword_priority_goa_before_mumbai():
    itinerary = generate("mumbai then goa")
    assert itinerary[0].title == "Arrive in Goa & Check-in"


@pytest.mark.parametrize("script", DESTINATION_SCRIPTS, ids=lambda s: s.name)
def test_destination_scripts_are_ordered_and_positive(script):
    itinerary = generate(f"trip to {script.keywords[0]}")
    assert itinerary
    starts = [activity.start_time for activity in itinerary]
    assert starts == sorted(starts)
    for activity in itinerary:
        assert activity.end_time > activity.start_time


def test_fractional_hour_offsets():
    itinerary = generate("rajasthan heritage")
    lunch = itinerary[1]
    assert lunch.type == ActivityType.DINING
    assert lunch.end_time - lunch.start_time == timedelta(hours=1.5)


def test_generic_itinerary_defaults_to_one_day():
    itinerary = generate("somewhere quiet")
    assert [a.title for a in itinerary] == [
        "Day 1: Explore Local Attractions",
        "Day 1: Local Cuisine Experience",
        "Day 1: Cultural Activity",
    ]
    base = datetime(2026, 3, 11, 9, 0, tzinfo=IST)
    assert [a.start_time for a in itinerary] == [base, base + timedelta(hours=3), base + timedelta(hours=6)]
    for activity in itinerary:
        assert activity.end_time - activity.start_time == timedelta(hours=2)


@pytest.mark.parametrize("prompt, days", [
    ("a 3 day trip to paris", 3),
    ("a 2-day break", 2),
    ("five days? make it a 5 day tour", 5),
    ("a week in iceland", 7),
])
def test_generic_itinerary_day_count(prompt, days):
    itinerary = generate(prompt)
    assert len(itinerary) == days * 3
    for day in range(days):
        chunk = itinerary[day * 3:(day + 1) * 3]
        assert all(a.title.startswith(f"Day {day + 1}: ") for a in chunk)
    day_starts = {a.start_time.date() for a in itinerary}
    assert len(day_starts) == days


def test_day_count_phrase_order():
    assert parse_day_count("2 day or 4 day") == 2
    assert parse_day_count("4-day trip this week") == 4
    assert parse_day_count("no hint") == 1


def test_match_destination_none():
    assert match_destination("paris in spring") is None


@pytest.mark.parametrize("prompt", ["", "abcd", "   abc   ", None])
def test_short_prompt_is_invalid(prompt):
    with pytest.raises(InvalidArgumentError):
        generate(prompt)


def test_unauthenticated_caller_rejected():
    with pytest.raises(UnauthenticatedError):
        generate("goa trip", authenticated=False)


def test_timestamps_serialize_as_utc_iso():
    itinerary = generate("goa trip")
    payload = itinerary[0].model_dump(mode="json", by_alias=True)
    assert payload["startTime"] == "2026-03-11T03:30:00.000Z"
    assert payload["endTime"] == "2026-03-11T05:30:00.000Z"
    assert payload["type"] == "transport"
