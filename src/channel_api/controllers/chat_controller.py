from channel_api.models.chat_model import ChatRequest
from channel_api.services.chat_service import ChatService


class ChatController:

    async def ask(self, data: ChatRequest, service: ChatService):
        answer = await service.ask(data.email, data.question)
        return {"answer": answer}

chat_controller = ChatController()
