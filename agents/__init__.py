"""
VoyaGo Agents

Stateless request handlers behind the VoyaGo callable and webhook endpoints.
"""

from .base_agent import BaseAgent
from .itinerary.itinerary_agent import ItineraryAgent
from .booking_search.booking_agent import BookingSearchAgent
from .chatbot.webhook_agent import DialogflowWebhookAgent

__all__ = ["BaseAgent", "ItineraryAgent", "BookingSearchAgent", "DialogflowWebhookAgent"]
