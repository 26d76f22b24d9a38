#!/usr/bin/env python3
"""
Callable endpoints (Firebase callable wire protocol)

Requests carry ``{"data": {...}}``; responses are ``{"result": ...}`` or
``{"error": {"status": ..., "message": ...}}``.
"""

import json
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
import structlog

from agents.base_agent import BaseAgent
from agents.booking_search.booking_agent import BookingSearchAgent
from agents.errors import CallableError, InvalidArgumentError, UnauthenticatedError
from agents.itinerary.itinerary_agent import ItineraryAgent
from api.auth import AuthContext, get_auth_context
from config.settings import Settings, settings as default_settings
from models.travel_models import BookingSearchRequest, ItineraryRequest

logger = structlog.get_logger()


def error_response(error: CallableError) -> JSONResponse:
    return JSONResponse(status_code=error.http_status, content={"error": error.to_dict()})


async def read_callable_data(request: Request) -> Dict[str, Any]:
    """Extract the ``data`` argument object from a callable request body"""
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise InvalidArgumentError("Request body is not valid JSON.")
    if not isinstance(body, dict):
        raise InvalidArgumentError("Request body must be a JSON object.")

    data = body.get("data")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidArgumentError("Callable data must be a JSON object.")
    return data


async def invoke(agent: BaseAgent, request: Request, request_model: type, auth: AuthContext) -> JSONResponse:
    """Run an agent for a callable request and wrap the outcome in the callable envelope"""
    try:
        if not auth.authenticated:
            raise UnauthenticatedError(agent.unauthenticated_message)

        data = await read_callable_data(request)
        try:
            arguments: BaseModel = request_model.model_validate(data)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid request data: {e.error_count()} invalid field(s).", cause=e)

        input_data = arguments.model_dump()
        input_data["authenticated"] = auth.authenticated

        result = await agent.run(input_data)
        return JSONResponse(content={"result": result.model_dump(mode="json", by_alias=True)})

    except CallableError as e:
        logger.warning("Callable request rejected", agent=agent.name, status=e.code, message=e.message)
        return error_response(e)
    except Exception as e:
        logger.error("Callable request failed", agent=agent.name, error=str(e), error_type=type(e).__name__)
        return error_response(CallableError("INTERNAL"))


def create_callable_app(settings: Settings = default_settings) -> FastAPI:
    callable_app = FastAPI(title="VoyaGo Callable Functions")

    callable_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,  # Disable credentials with wildcard
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @callable_app.post("/generateItinerary")
    async def generate_itinerary(request: Request, auth: AuthContext = Depends(get_auth_context)):
        """
        Mock AI itinerary generator
        """
        return await invoke(ItineraryAgent(), request, ItineraryRequest, auth)

    @callable_app.post("/searchBookings")
    async def search_bookings(request: Request, auth: AuthContext = Depends(get_auth_context)):
        """
        Mock booking search for flights, hotels and buses
        """
        return await invoke(BookingSearchAgent(), request, BookingSearchRequest, auth)

    return callable_app
