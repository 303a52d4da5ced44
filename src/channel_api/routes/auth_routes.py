from fastapi import APIRouter, Depends

from channel_api.controllers.auth_controller import auth_controller
from channel_api.middlewares.dependencies import get_account_service
from channel_api.models.user_model import UserRegister, LoginRequest
from channel_api.services.account_service import AccountService

router = APIRouter()

# POST /api/register
@router.post("/register")
async def register(data: UserRegister, service: AccountService = Depends(get_account_service)):
    return await auth_controller.register(data, service)

# POST /api/login
@router.post("/login")
async def login(data: LoginRequest, service: AccountService = Depends(get_account_service)):
    return await auth_controller.login(data, service)
