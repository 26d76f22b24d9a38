"""
Hand-authored itinerary scripts keyed by destination.

Offsets are hours from the itinerary reference instant (tomorrow 09:00).
"""

from typing import NamedTuple, Optional, Tuple

from models.travel_models import ActivityType


class ActivityTemplate(NamedTuple):
    title: str
    type: ActivityType
    location: str
    description: str
    notes: str
    start_hours: float = 0.0
    end_hours: float = 0.0


class DestinationScript(NamedTuple):
    name: str
    keywords: Tuple[str, ...]
    activities: Tuple[ActivityTemplate, ...]


GOA = DestinationScript(
    name="goa",
    keywords=("goa",),
    activities=(
        ActivityTemplate("Arrive in Goa & Check-in", ActivityType.TRANSPORT, "Goa Airport (GOI)",
                         "Airport pickup and hotel check-in",
                         "Pre-book airport transfer for convenience", 0, 2),
        ActivityTemplate("Lunch at Britto's", ActivityType.DINING, "Baga Beach, North Goa",
                         "Famous beachside restaurant with fresh seafood",
                         "Try the seafood platter and king fish curry", 4, 5),
        ActivityTemplate("Relax at Baga Beach", ActivityType.ACTIVITY, "Baga Beach, North Goa",
                         "Beach relaxation and water sports",
                         "Perfect time for parasailing and jet skiing", 6, 9),
        ActivityTemplate("Sunset at Anjuna Beach", ActivityType.SIGHTSEEING, "Anjuna Beach, North Goa",
                         "Famous sunset point with hippie culture",
                         "Don't miss the Wednesday flea market if visiting on Wednesday", 10, 11),
    ),
)

KERALA = DestinationScript(
    name="kerala",
    keywords=("kerala",),
    activities=(
        ActivityTemplate("Backwater Cruise", ActivityType.ACTIVITY, "Alleppey Backwaters",
                         "Traditional houseboat experience",
                         "Book overnight houseboat for full experience", 0, 4),
        ActivityTemplate("Kerala Traditional Lunch", ActivityType.DINING, "Local Village Restaurant",
                         "Authentic Kerala meal on banana leaf",
                         "Try the fish curry and appam", 5, 6),
        ActivityTemplate("Spice Plantation Tour", ActivityType.SIGHTSEEING, "Thekkady Spice Gardens",
                         "Learn about spice cultivation",
                         "Buy fresh spices and tea directly from farmers", 7, 10),
    ),
)

MUMBAI = DestinationScript(
    name="mumbai",
    keywords=("mumbai",),
    activities=(
        ActivityTemplate("Visit Gateway of India", ActivityType.SIGHTSEEING, "Colaba, Mumbai",
                         "Iconic Mumbai landmark",
                         "Take a boat ride to Elephanta Caves from here", 0, 2),
        ActivityTemplate("Business Lunch Meeting", ActivityType.BUSINESS, "Nariman Point Business District",
                         "Professional meeting at business district",
                         "Book conference room in advance", 4, 6),
        ActivityTemplate("Marine Drive Evening Walk", ActivityType.ACTIVITY, "Marine Drive, Mumbai",
                         "Stroll along the Queen's Necklace",
                         "Perfect for sunset views and street food", 8, 10),
    ),
)

RAJASTHAN = DestinationScript(
    name="rajasthan",
    keywords=("rajasthan", "jaipur"),
    activities=(
        ActivityTemplate("Amber Fort Visit", ActivityType.SIGHTSEEING, "Amber Fort, Jaipur",
                         "Magnificent Rajput fort architecture",
                         "Take elephant ride or jeep to reach the fort", 0, 3),
        ActivityTemplate("Royal Rajasthani Lunch", ActivityType.DINING, "City Palace Restaurant, Jaipur",
                         "Traditional Rajasthani thali",
                         "Try dal baati churma and gatte ki sabzi", 4, 5.5),
        ActivityTemplate("Hawa Mahal Photography", ActivityType.SIGHTSEEING, "Hawa Mahal, Jaipur",
                         "Palace of Winds photo session",
                         "Best views from the opposite coffee shop", 6, 7.5),
        ActivityTemplate("Johari Bazaar Shopping", ActivityType.SHOPPING, "Johari Bazaar, Jaipur",
                         "Shop for jewelry, textiles, and handicrafts",
                         "Bargain for best prices and check gem certificates", 8, 10),
    ),
)

HIMACHAL = DestinationScript(
    name="himachal",
    keywords=("himachal", "manali", "shimla"),
    activities=(
        ActivityTemplate("Trek to Triund", ActivityType.ACTIVITY, "McLeod Ganj, Himachal Pradesh",
                         "Popular trekking destination with mountain views",
                         "Carry warm clothes and water. Trek difficulty: Easy to moderate", 0, 6),
        ActivityTemplate("Mountain Cafe Lunch", ActivityType.DINING, "Dharamkot Village",
                         "Cafe with panoramic mountain views",
                         "Try momos and thukpa for authentic mountain food", 7, 8),
        ActivityTemplate("Visit Dalai Lama Temple", ActivityType.SIGHTSEEING, "McLeod Ganj, Himachal Pradesh",
                         "Peaceful Buddhist temple complex",
                         "Respect local customs and maintain silence", 9, 10.5),
    ),
)

BANGALORE = DestinationScript(
    name="bangalore",
    keywords=("bangalore", "bengaluru"),
    activities=(
        ActivityTemplate("Cubbon Park Morning Walk", ActivityType.ACTIVITY, "Cubbon Park, Bangalore",
                         "Green oasis in the heart of the city",
                         "Perfect for jogging and photography", 0, 2),
        ActivityTemplate("South Indian Breakfast", ActivityType.DINING, "MTR Restaurant, Bangalore",
                         "Authentic South Indian breakfast",
                         "Try masala dosa and filter coffee", 2.5, 3.5),
        ActivityTemplate("Bangalore Palace Tour", ActivityType.SIGHTSEEING, "Bangalore Palace",
                         "Tudor-style architecture palace",
                         "Audio guide available for detailed history", 5, 7),
        ActivityTemplate("Microbrewery Dinner", ActivityType.DINING, "Koramangala, Bangalore",
                         "Experience Bangalore's famous brewery culture",
                         "Try local craft beers and Continental food", 10, 12),
    ),
)

# Checked in order, first keyword hit wins
DESTINATION_SCRIPTS: Tuple[DestinationScript, ...] = (GOA, KERALA, MUMBAI, RAJASTHAN, HIMACHAL, BANGALORE)

# Generic plan used when no destination keyword matches; timing comes from the day slot
GENERIC_ACTIVITIES: Tuple[ActivityTemplate, ...] = (
    ActivityTemplate("Explore Local Attractions", ActivityType.SIGHTSEEING, "City Center",
                     "Visit popular landmarks and tourist spots",
                     "Research local history and book guided tours"),
    ActivityTemplate("Local Cuisine Experience", ActivityType.DINING, "Traditional Restaurant",
                     "Taste authentic local dishes",
                     "Ask locals for recommendations"),
    ActivityTemplate("Cultural Activity", ActivityType.ACTIVITY, "Cultural Center",
                     "Immerse in local culture and traditions",
                     "Respect local customs and dress codes"),
    ActivityTemplate("Shopping for Souvenirs", ActivityType.SHOPPING, "Local Market",
                     "Buy unique local handicrafts and souvenirs",
                     "Bargain respectfully and check authenticity"),
)

GENERIC_ACTIVITIES_PER_DAY = 3
GENERIC_SLOT_HOURS = 3
GENERIC_DURATION_HOURS = 2

# (phrases, days) in match order
DAY_COUNT_PHRASES: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("2 day", "2-day"), 2),
    (("3 day", "3-day"), 3),
    (("4 day", "4-day"), 4),
    (("5 day", "5-day"), 5),
    (("week",), 7),
)


def match_destination(prompt: str) -> Optional[DestinationScript]:
    """Return the first destination script whose keyword appears in the prompt"""
    for script in DESTINATION_SCRIPTS:
        if any(keyword in prompt for keyword in script.keywords):
            return script
    return None


def parse_day_count(prompt: str, default: int = 1) -> int:
    for phrases, days in DAY_COUNT_PHRASES:
        if any(phrase in prompt for phrase in phrases):
            return days
    return default
