#!/usr/bin/env python3
"""
Dialogflow fulfillment webhook for the VoyaGo chatbot
"""

import json
from functools import lru_cache

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
import structlog

from agents.chatbot.webhook_agent import DialogflowWebhookAgent, ERROR_MESSAGE
from config.settings import settings
from services.translation_service import (
    DisabledTranslationService,
    GoogleTranslationService,
    TranslationService,
)

logger = structlog.get_logger()

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST",
    "Access-Control-Allow-Headers": "Content-Type",
}


@lru_cache()
def get_translator() -> TranslationService:
    if not settings.TRANSLATION_ENABLED:
        logger.warning("⚠️ Translation disabled - Translate intent will return the fallback message")
        return DisabledTranslationService()
    return GoogleTranslationService()


@router.api_route("/dialogflowWebhook", methods=["GET", "POST", "OPTIONS"])
async def dialogflow_webhook(request: Request, translator: TranslationService = Depends(get_translator)):
    """
    Handle Dialogflow webhook requests, in particular translation requests
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    raw = await request.body()
    try:
        payload = json.loads(raw) if raw else {}
    except ValueError as e:
        logger.error("Webhook error", error=str(e), error_type=type(e).__name__)
        return JSONResponse(status_code=500, content={"fulfillmentText": ERROR_MESSAGE}, headers=CORS_HEADERS)

    agent = DialogflowWebhookAgent(translator)
    status_code, fulfillment = await agent.handle(payload)

    return JSONResponse(
        status_code=status_code,
        content=fulfillment.model_dump(by_alias=True),
        headers=CORS_HEADERS,
    )
