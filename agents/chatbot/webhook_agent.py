from enum import Enum
from typing import Dict, Any, Optional, Tuple
from agents.base_agent import BaseAgent
from agents.chatbot.languages import language_code
from models.travel_models import FulfillmentResponse, WebhookRequest
from services.translation_service import TranslationService
import structlog

logger = structlog.get_logger()

MISSING_TRANSLATION_FIELDS_MESSAGE = "Sorry, I need both text to translate and a target language."
TRANSLATION_FAILED_MESSAGE = "Sorry, I couldn't translate that right now. Please try again later."
HELP_MESSAGE = (
    "I can help you with travel planning, expense tracking, and translating phrases. "
    "I can also answer questions about using VoyaGo. What would you like help with?"
)
DEFAULT_MESSAGE = (
    "I'm here to help with your travel needs! "
    "You can ask me for help or ask me to translate phrases to different languages."
)
ERROR_MESSAGE = "Sorry, I encountered an error processing your request."


def parameter_text(value: Any) -> str:
    """Render a Dialogflow parameter as text; list values are comma-joined"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(parameter_text(item) for item in value)
    return str(value)


class Intent(str, Enum):
    TRANSLATE = "Translate"
    HELP = "Help"
    UNKNOWN = "Unknown"

    @classmethod
    def from_display_name(cls, display_name: Optional[str]) -> "Intent":
        if display_name == cls.TRANSLATE.value:
            return cls.TRANSLATE
        if display_name == cls.HELP.value:
            return cls.HELP
        return cls.UNKNOWN


class DialogflowWebhookAgent(BaseAgent):
    """
    Dialogflow fulfillment for the VoyaGo chatbot.

    Routes on the intent display name. Only the Translate intent reaches an
    external service; every outcome is returned as fulfillment text.
    """

    def __init__(self, translator: TranslationService):
        super().__init__("DialogflowWebhookAgent")
        self.translator = translator

    async def handle(self, payload: Any) -> Tuple[int, FulfillmentResponse]:
        """Return (http_status, response); never raises"""
        try:
            response = await self.run({"payload": payload})
            return 200, response
        except Exception as e:
            logger.error("Webhook error", error=str(e), error_type=type(e).__name__)
            return 500, FulfillmentResponse(fulfillment_text=ERROR_MESSAGE)

    async def execute(self, input_data: Dict[str, Any]) -> FulfillmentResponse:
        request = WebhookRequest.from_payload(input_data.get("payload"))

        self.log("Dialogflow webhook called", intent=request.intent_name)

        intent = Intent.from_display_name(request.intent_name)
        if intent is Intent.TRANSLATE:
            text = await self._translate(request.parameter("text"), request.parameter("language"))
        elif intent is Intent.HELP:
            text = HELP_MESSAGE
        else:
            self.log(f"Unhandled intent: {request.intent_name}", intent=request.intent_name)
            text = DEFAULT_MESSAGE

        return FulfillmentResponse(fulfillment_text=text)

    async def _translate(self, text: Any, target_language: Any) -> str:
        self.log(f'Translation request: "{text}" to {target_language}')

        if not text or not target_language:
            return MISSING_TRANSLATION_FIELDS_MESSAGE

        text = parameter_text(text)
        target_language = parameter_text(target_language)
        code = language_code(target_language)

        try:
            translation = await self.translator.translate(text, code)
        except Exception as e:
            logger.error("TRANSLATION_ERROR", error=str(e), error_type=type(e).__name__,
                         target_language=target_language, language_code=code)
            return TRANSLATION_FAILED_MESSAGE

        self.log(f'Translation result: "{translation}"', language_code=code)
        return f'"{text}" in {target_language} is: "{translation}"'
