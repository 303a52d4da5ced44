from fastapi import Request

from channel_api.services.account_service import AccountService
from channel_api.services.chat_service import ChatService


def get_account_service(request: Request) -> AccountService:
    return AccountService(request.app.state.user_store)


def get_chat_service(request: Request) -> ChatService:
    return ChatService(request.app.state.gateway, request.app.state.chat_store)
