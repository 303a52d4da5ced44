import logging
from datetime import datetime, timezone

from channel_api.errors import ValidationError
from channel_api.models.chat_model import chat_record

logger = logging.getLogger(__name__)


class ChatService:
    """Answers one question statelessly and logs the exchange.

    The record is only written after the gateway returns an answer, so an
    upstream failure leaves no trace in the history.
    """

    def __init__(self, gateway, chat_store):
        self.gateway = gateway
        self.chat_store = chat_store

    async def ask(self, email: str | None, question: str | None) -> str:
        if not email or not question:
            raise ValidationError()

        answer = await self.gateway.complete(question)

        record = chat_record(email, question, answer, datetime.now(timezone.utc))
        await self.chat_store.save_chat_record(record)

        logger.info(f"Answered question for {email}")
        return answer
