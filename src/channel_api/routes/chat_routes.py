from fastapi import APIRouter, Depends

from channel_api.controllers.chat_controller import chat_controller
from channel_api.middlewares.dependencies import get_chat_service
from channel_api.models.chat_model import ChatRequest
from channel_api.services.chat_service import ChatService

router = APIRouter()

# POST /api/chatbot
@router.post("/chatbot")
async def chatbot(data: ChatRequest, service: ChatService = Depends(get_chat_service)):
    return await chat_controller.ask(data, service)
