"""
Translation service used by the chatbot webhook.

The webhook only depends on the async ``translate(text, target_language)``
capability, so tests can swap in any object with that method.
"""

import asyncio
from typing import Protocol

import structlog

from agents.errors import TranslationError

logger = structlog.get_logger()


class TranslationService(Protocol):
    async def translate(self, text: str, target_language: str) -> str:
        """Translate ``text`` into ``target_language`` (an ISO-639-1 code)"""
        ...


class GoogleTranslationService:
    """Google Cloud Translation (v2 / Basic) backed translator"""

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            from google.cloud import translate_v2 as translate

            logger.info("🔧 Initializing Google Cloud Translation client")
            self._client = translate.Client()
        return self._client

    async def translate(self, text: str, target_language: str) -> str:
        try:
            response = await asyncio.to_thread(
                self.client.translate, text, target_language=target_language, format_="text"
            )
        except Exception as e:
            raise TranslationError("Google Cloud Translation request failed", cause=e) from e

        # A list comes back when the client batches; only one text is sent here
        if isinstance(response, list):
            if not response:
                raise TranslationError("Google Cloud Translation returned no results")
            response = response[0]

        translated = response.get("translatedText") if isinstance(response, dict) else None
        if translated is None:
            raise TranslationError("Google Cloud Translation response had no translatedText")
        return translated


class DisabledTranslationService:
    """Used when TRANSLATION_ENABLED is false; every call fails"""

    async def translate(self, text: str, target_language: str) -> str:
        raise TranslationError("Translation is disabled")
