from channel_api.models.user_model import UserRegister, LoginRequest
from channel_api.services.account_service import AccountService


class AuthController:

    async def register(self, data: UserRegister, service: AccountService):
        await service.register(data.name, data.email, data.password)
        return {"message": "Registered successfully"}

    async def login(self, data: LoginRequest, service: AccountService):
        user = await service.login(data.email, data.password)
        # no session is issued, the page keeps userEmail for later chat calls
        return {"message": "Login success", "userName": user["name"], "userEmail": user["email"]}

auth_controller = AuthController()
